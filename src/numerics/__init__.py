"""
Numerics — детерминированные квадратные корни произвольной точности.

Модуль не зависит от floating-point: все вычисления выполняются над int
и decimal.Decimal с явно заданной точностью и политикой округления.
"""
