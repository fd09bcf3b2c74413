"""
Проверка условий Халла-Добелла для смешанного генератора Лемера

X(n+1) = (a * X(n) + c) mod m имеет максимальный период m тогда и только тогда, когда:
1. gcd(c, m) = 1
2. a - 1 кратно всем простым делителям m
3. Если m кратно 4, то a - 1 должно быть кратно 4

Модуль возвращает только структурированный результат, текстовое
оформление находится в lehmer.report.
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple

from .number_theory import gcd, get_prime_factors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HullReport:
    """Результат проверки условий Халла-Добелла для параметров (a, c, m)"""
    coprime_ok: bool
    factor_divisibility_ok: bool
    mod4_ok: bool
    gcd_c_m: int
    prime_factors: FrozenSet[int]

    @property
    def all_conditions_met(self) -> bool:
        return self.coprime_ok and self.factor_divisibility_ok and self.mod4_ok


def check_hull_conditions(a: int, c: int, m: int) -> HullReport:
    """
    Проверка условий Халла-Добелла для максимального периода

    Все три условия вычисляются всегда, даже если первое уже не выполнено,
    чтобы вызывающая сторона могла показать полную диагностику.
    Ожидается m > 0.

    Returns:
        HullReport с результатом каждого условия и общим вердиктом
    """
    # Условие 1: gcd(c, m) = 1
    gcd_c_m = gcd(c, m)
    coprime_ok = gcd_c_m == 1

    # Условие 2: a ≡ 1 (mod p) для всех простых делителей p числа m.
    # Для m <= 1 делителей нет, и условие считается выполненным
    prime_factors = get_prime_factors(m)
    factor_divisibility_ok = all((a - 1) % p == 0 for p in prime_factors)

    # Условие 3: a ≡ 1 (mod 4) если m ≡ 0 (mod 4)
    if m % 4 == 0:
        mod4_ok = (a - 1) % 4 == 0
    else:
        mod4_ok = True  # Условие не применимо

    return HullReport(
        coprime_ok=coprime_ok,
        factor_divisibility_ok=factor_divisibility_ok,
        mod4_ok=mod4_ok,
        gcd_c_m=gcd_c_m,
        prime_factors=prime_factors,
    )


def expected_period(a: int, c: int, m: int) -> Optional[int]:
    """Гарантированный период m, либо None если условия не выполнены"""
    if check_hull_conditions(a, c, m).all_conditions_met:
        return m
    return None


def find_optimal_parameters(m: int, max_attempts: int = 1000, max_c: int = 100,
                            limit: int = 10) -> List[Tuple[int, int, int]]:
    """
    Поиск оптимальных параметров (a, c) для заданного модуля m

    Args:
        m: модуль
        max_attempts: верхняя граница перебора множителя a
        max_c: верхняя граница перебора приращения c
        limit: максимальное количество найденных наборов

    Returns:
        Список кортежей (a, c, m) с гарантированным периодом m
    """
    optimal_params = []
    if limit <= 0:
        return optimal_params

    # Разложение m не зависит от a и c, поэтому условия 2 и 3 проверяются один раз на a
    prime_factors = get_prime_factors(m)
    for a in range(2, min(m, max_attempts)):
        if not all((a - 1) % p == 0 for p in prime_factors):
            continue
        if m % 4 == 0 and (a - 1) % 4 != 0:
            continue
        for c in range(1, min(m, max_c)):
            if gcd(c, m) == 1:
                optimal_params.append((a, c, m))
                if len(optimal_params) >= limit:
                    logger.debug("found %d parameter sets for m=%d", len(optimal_params), m)
                    return optimal_params

    logger.debug("found %d parameter sets for m=%d", len(optimal_params), m)
    return optimal_params
