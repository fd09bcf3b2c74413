"""
Статистический анализ генератора Лемера: фактический период, проверка
полного периода, критерий хи-квадрат для равномерности, корреляция соседних
значений, сводная таблица параметров и графики.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Sequence

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from scipy import stats

from .entities import LehmerGenerator
from .hull_conditions import check_hull_conditions

logger = logging.getLogger(__name__)

# Известные наборы параметров для сравнения
KNOWN_PARAMETERS: List[Dict[str, Any]] = [
    {"name": "Park & Miller", "a": 16807, "c": 0, "m": 2**31 - 1},
    {"name": "Numerical Recipes", "a": 1664525, "c": 1013904223, "m": 2**32},
    {"name": "Borland C++", "a": 22695477, "c": 1, "m": 2**32},
    {"name": "Microsoft C", "a": 214013, "c": 2531011, "m": 2**32},
    {"name": "Хороший пример", "a": 5, "c": 1, "m": 16},
    {"name": "Плохой пример", "a": 3, "c": 5, "m": 16},
]


def measure_actual_period(a: int, c: int, m: int, seed: int = 1, max_iterations: int = None) -> int:
    """
    Измерение фактического периода генератора

    Returns:
        Фактический период или -1 если не найден
    """
    gen = LehmerGenerator(seed=seed, a=a, c=c, m=m)
    return gen.get_period(max_iterations)


def verify_full_period(generator: LehmerGenerator) -> bool:
    """
    Проверка полного периода перебором: m шагов от текущего значения
    посещают каждое число из [0, m) ровно один раз.
    Состояние переданного генератора не меняется.
    """
    probe = LehmerGenerator.from_params(generator.params, generator.current)
    seen = set()
    for _ in range(probe.m):
        value = probe.next_int()
        if value in seen:
            return False
        seen.add(value)
    return len(seen) == probe.m


class StatisticalAnalyzer:
    """Класс для статистического анализа последовательностей генератора"""

    def test_uniformity_chi2(self, data: Sequence[float], n_bins: int = 10,
                             alpha: float = 0.05) -> Dict[str, Any]:
        """Проверка гипотезы о равномерности на [0, 1) по критерию хи-квадрат"""
        if n_bins < 2:
            return {'is_uniform': False, 'p_value': 0.0, 'reason': 'Нужно хотя бы 2 интервала'}
        if len(data) < n_bins:
            return {'is_uniform': False, 'p_value': 0.0, 'reason': 'Недостаточно данных'}

        observed, _ = np.histogram(np.asarray(data, dtype=float), bins=n_bins, range=(0.0, 1.0))
        expected = np.full(n_bins, len(data) / n_bins)
        chi2_stat, p_value = stats.chisquare(observed, expected)

        return {
            'is_uniform': bool(p_value > alpha),
            'p_value': float(p_value),
            'chi2_statistic': float(chi2_stat),
            'degrees_of_freedom': n_bins - 1,
            'observed': observed.tolist(),
            'expected': expected.tolist(),
        }

    def serial_correlation(self, data: Sequence[float], lag: int = 1) -> float:
        """Коэффициент корреляции между x(i) и x(i + lag)"""
        if lag <= 0:
            raise ValueError("lag должен быть положительным")
        values = np.asarray(data, dtype=float)
        if len(values) <= lag + 1:
            return 0.0
        head, tail = values[:-lag], values[lag:]
        if np.ptp(head) == 0 or np.ptp(tail) == 0:
            return 0.0
        return float(np.corrcoef(head, tail)[0, 1])

    def describe(self, data: Sequence[float]) -> Dict[str, float]:
        """Выборочные характеристики в сравнении с равномерным распределением"""
        values = np.asarray(data, dtype=float)
        if len(values) == 0:
            raise ValueError("Пустая выборка")
        return {
            'mean': float(np.mean(values)),
            'variance': float(np.var(values)),
            'min': float(np.min(values)),
            'max': float(np.max(values)),
            'expected_mean': 0.5,
            'expected_variance': 1 / 12,
        }


def parameter_table(param_sets: Iterable[Mapping[str, Any]], seed: int = 1,
                    max_iterations: int = None) -> pd.DataFrame:
    """
    Сводная таблица по наборам параметров

    Args:
        param_sets: словари с ключами name, a, c, m
        seed: начальное значение для измерения периода
        max_iterations: граница поиска периода

    Returns:
        DataFrame с условиями Халла-Добелла, ожидаемым и фактическим периодом
    """
    rows = []
    for params in param_sets:
        a, c, m = params['a'], params['c'], params['m']
        report = check_hull_conditions(a, c, m)
        logger.debug("measuring period for %s", params.get('name', (a, c, m)))
        rows.append({
            'name': params.get('name', f"a={a}, c={c}, m={m}"),
            'a': a,
            'c': c,
            'm': m,
            'gcd_c_m': report.coprime_ok,
            'prime_factors_condition': report.factor_divisibility_ok,
            'mod4_condition': report.mod4_ok,
            'all_conditions_met': report.all_conditions_met,
            'expected_period': m if report.all_conditions_met else None,
            'actual_period': measure_actual_period(a, c, m, seed=seed % m,
                                                   max_iterations=max_iterations),
        })
    return pd.DataFrame(rows, columns=[
        'name', 'a', 'c', 'm', 'gcd_c_m', 'prime_factors_condition', 'mod4_condition',
        'all_conditions_met', 'expected_period', 'actual_period',
    ])


def plot_distribution(data: Sequence[float], output_path: str, n_bins: int = 10,
                      dpi: int = 300, show: bool = False) -> str:
    """Гистограмма значений на [0, 1) с линией ожидаемой частоты"""
    plt.figure(figsize=(10, 6))
    plt.hist(data, bins=n_bins, range=(0.0, 1.0), color='steelblue', edgecolor='black', alpha=0.7)
    plt.axhline(y=len(data) / n_bins, color='r', linestyle='--', label='Ожидаемая частота')
    plt.xlabel('Значение')
    plt.ylabel('Частота')
    plt.title('Распределение значений генератора')
    plt.legend()
    plt.grid(True, alpha=0.3)
    plt.savefig(output_path, dpi=dpi, bbox_inches='tight')
    if show:
        plt.show()
    plt.close()
    return output_path


def plot_scatter_pairs(data: Sequence[float], output_path: str, dpi: int = 300,
                       show: bool = False) -> str:
    """Точки (x(i), x(i+1)): решетчатая структура видна для плохих параметров"""
    values = np.asarray(data, dtype=float)
    plt.figure(figsize=(8, 8))
    plt.scatter(values[:-1], values[1:], s=2, alpha=0.5)
    plt.xlabel('x(i)')
    plt.ylabel('x(i+1)')
    plt.title('Пары соседних значений')
    plt.grid(True, alpha=0.3)
    plt.savefig(output_path, dpi=dpi, bbox_inches='tight')
    if show:
        plt.show()
    plt.close()
    return output_path
