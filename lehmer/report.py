"""
Текстовое оформление результатов: условия Халла-Добелла, последовательности,
проверка равномерности. Функции только формируют строки, вывод выполняет CLI.
"""

from typing import Any, Dict, List, Sequence

from .hull_conditions import HullReport


def _mark(ok: bool) -> str:
    return "выполнено" if ok else "НЕ выполнено"


def format_hull_report(report: HullReport, a: int, c: int, m: int) -> List[str]:
    """Построчное описание каждого условия и общего вердикта"""
    lines = [f"Условия Халла-Добелла для a = {a}, c = {c}, m = {m}:"]

    lines.append(f"  1. gcd(c, m) = gcd({c}, {m}) = {report.gcd_c_m}: {_mark(report.coprime_ok)}")

    factors = sorted(report.prime_factors)
    if factors:
        factors_text = ", ".join(str(p) for p in factors)
        lines.append(f"  2. a - 1 = {a - 1} кратно простым делителям m ({factors_text}): "
                     f"{_mark(report.factor_divisibility_ok)}")
    else:
        lines.append("  2. У m нет простых делителей, условие выполнено")

    if m % 4 == 0:
        lines.append(f"  3. m кратно 4, (a - 1) mod 4 = {(a - 1) % 4}: {_mark(report.mod4_ok)}")
    else:
        lines.append("  3. m не кратно 4, условие не применимо")

    if report.all_conditions_met:
        lines.append(f"Все условия выполнены, период равен {m}")
    else:
        lines.append("Условия не выполнены, полный период не гарантирован")
    return lines


def format_sequence(values: Sequence[Any], per_line: int = 10) -> List[str]:
    """Разбивка последовательности на строки по per_line значений"""
    if per_line <= 0:
        raise ValueError("per_line должен быть положительным")
    lines = []
    for start in range(0, len(values), per_line):
        chunk = values[start:start + per_line]
        lines.append(" ".join(f"{v:.6f}" if isinstance(v, float) else str(v) for v in chunk))
    return lines


def format_uniformity(result: Dict[str, Any]) -> List[str]:
    """Описание результата критерия хи-квадрат"""
    if 'reason' in result:
        return [f"Проверка равномерности невозможна: {result['reason']}"]
    verdict = "равномерно" if result['is_uniform'] else "НЕ равномерно"
    return [
        f"Хи-квадрат = {result['chi2_statistic']:.4f}, "
        f"степеней свободы = {result['degrees_of_freedom']}, "
        f"p-value = {result['p_value']:.4f}",
        f"Распределение: {verdict}",
    ]
