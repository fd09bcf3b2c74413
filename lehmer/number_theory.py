"""
Теоретико-числовые примитивы для проверки условий Халла-Добелла:
наибольший общий делитель и множество простых делителей числа.
"""

from typing import FrozenSet


def gcd(n1: int, n2: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида)

    Оба аргумента берутся по модулю, поэтому результат всегда неотрицателен:
    gcd(0, k) = |k|, gcd(k, 0) = |k|.
    """
    a, b = abs(n1), abs(n2)
    while b:
        a, b = b, a % b
    return a


def get_prime_factors(n: int) -> FrozenSet[int]:
    """
    Получение множества простых делителей числа (без кратности)

    Args:
        n: исследуемое число

    Returns:
        Множество различных простых делителей; для n <= 1 - пустое множество
    """
    factors = set()
    if n <= 1:
        return frozenset(factors)

    if n % 2 == 0:
        factors.add(2)
        while n % 2 == 0:
            n //= 2

    d = 3
    while d * d <= n:
        if n % d == 0:
            factors.add(d)
            while n % d == 0:
                n //= d
        d += 2

    # Остаток больше 1 сам является простым делителем
    if n > 1:
        factors.add(n)
    return frozenset(factors)
