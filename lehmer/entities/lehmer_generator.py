"""
Генератор последовательности равномерно распределенных случайных чисел
на основе смешанного алгоритма Лемера

Смешанный алгоритм Лемера (Linear Congruential Generator):
X(n+1) = (a * X(n) + c) mod m

где:
- a - множитель (multiplier)
- c - приращение (increment)
- m - модуль (modulus)
- X(0) - начальное значение (seed)

Конструктор проверяет только диапазоны параметров (m > 0, 0 <= a, c, X(0) < m).
Условия Халла-Добелла для максимального периода вызывающая сторона должна
проверить заранее через lehmer.hull_conditions.check_hull_conditions.

Целые числа Python не ограничены по разрядности, поэтому произведение
a * X(n) не переполняется ни при каких параметрах; большие модули влияют
только на скорость.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List

from ..hull_conditions import HullReport, check_hull_conditions

logger = logging.getLogger(__name__)


class InvalidParameter(ValueError):
    """Параметр генератора вне допустимого диапазона"""

    def __init__(self, name: str, value: int, message: str):
        super().__init__(f"{name} = {value}: {message}")
        self.name = name
        self.value = value


def _check_in_range(name: str, value: int, m: int):
    if not 0 <= value < m:
        raise InvalidParameter(name, value, f"должно быть в диапазоне [0, {m})")


@dataclass(frozen=True)
class GeneratorParameters:
    """Неизменяемый набор параметров (a, c, m)"""
    a: int
    c: int
    m: int

    def __post_init__(self):
        if self.m <= 0:
            raise InvalidParameter("m", self.m, "модуль должен быть положительным")
        _check_in_range("a", self.a, self.m)
        _check_in_range("c", self.c, self.m)


class LehmerGenerator:
    """
    Генератор псевдослучайных чисел на основе смешанного алгоритма Лемера
    """

    # Параметры по умолчанию (m = 2^31 - 1)
    DEFAULT_M: int = 2**31 - 1  # Простое число Мерсенна
    DEFAULT_A: int = 16807  # Рекомендуемый множитель для m = 2^31 - 1
    DEFAULT_C: int = 0  # Мультипликативный метод по умолчанию

    def __init__(self, seed: int = 1, a: int = None, c: int = None, m: int = None):
        """
        Инициализация генератора

        Args:
            seed: начальное значение (X0)
            a: множитель
            c: приращение
            m: модуль

        Raises:
            InvalidParameter: m <= 0 или a, c, seed вне [0, m)
        """
        self._params = GeneratorParameters(
            a=self._fill_param(a, self.DEFAULT_A),
            c=self._fill_param(c, self.DEFAULT_C),
            m=self._fill_param(m, self.DEFAULT_M),
        )
        _check_in_range("seed", seed, self.m)

        self._initial_seed = seed
        self._current = seed
        logger.debug("created %r", self)

    @classmethod
    def from_params(cls, params: GeneratorParameters, seed: int) -> "LehmerGenerator":
        return cls(seed=seed, a=params.a, c=params.c, m=params.m)

    @staticmethod
    def _fill_param(num: int | None, default_value: int) -> int:
        """Заполняет параметр значением по умолчанию, если он None"""
        if num is None:
            return default_value
        return num

    @property
    def params(self) -> GeneratorParameters:
        return self._params

    @property
    def a(self) -> int:
        return self._params.a

    @property
    def c(self) -> int:
        return self._params.c

    @property
    def m(self) -> int:
        return self._params.m

    @property
    def seed(self) -> int:
        return self._initial_seed

    @property
    def current(self) -> int:
        """Текущее состояние X(n)"""
        return self._current

    def check_hull(self) -> HullReport:
        """Проверка условий Халла-Добелла для параметров генератора"""
        return check_hull_conditions(self.a, self.c, self.m)

    def next_int(self) -> int:
        """
        Генерация следующего целого числа

        Returns:
            Следующее псевдослучайное целое число в диапазоне [0, m)
        """
        value = (self.a * self._current + self.c) % self.m
        # При неотрицательных параметрах ветка недостижима
        if value < 0:
            value += self.m
        self._current = value
        return value

    def next_float(self) -> float:
        """
        Генерация следующего числа с плавающей точкой в диапазоне [0, 1)

        Returns:
            Следующее псевдослучайное число с плавающей точкой
        """
        return self.next_int() / self.m

    def generate_sequence(self, count: int) -> List[int]:
        """
        Генерация последовательности целых чисел

        Args:
            count: количество чисел для генерации

        Returns:
            Список псевдослучайных целых чисел
        """
        return [self.next_int() for _ in range(count)]

    def generate_float_sequence(self, count: int) -> List[float]:
        """
        Генерация последовательности чисел с плавающей точкой

        Args:
            count: количество чисел для генерации

        Returns:
            Список псевдослучайных чисел с плавающей точкой в диапазоне [0, 1)
        """
        return [self.next_float() for _ in range(count)]

    def reset(self):
        """Сброс генератора к начальному состоянию"""
        self._current = self._initial_seed

    def set_seed(self, seed: int):
        """Установка нового начального значения"""
        _check_in_range("seed", seed, self.m)
        self._initial_seed = seed
        self._current = seed

    def get_period(self, max_iterations: int = None) -> int:
        """
        Определение периода генератора

        Начальное значение считается уже встреченным, поэтому для периода,
        равного m, достаточно m итераций.

        Args:
            max_iterations: максимальное количество итераций для поиска периода

        Returns:
            Период генератора (или -1 если не найден в пределах max_iterations)
        """
        if max_iterations is None:
            max_iterations = min(self.m, 10**6)  # Ограничиваем поиск
        logger.debug("searching period of %s within %d steps", self, max_iterations)

        original_current = self._current
        self.reset()

        # значение -> номер шага, на котором оно впервые появилось
        seen_at = {self._current: 0}
        period = -1
        for i in range(1, max_iterations + 1):
            value = self.next_int()
            if value in seen_at:
                period = i - seen_at[value]
                break
            seen_at[value] = i

        self._current = original_current
        return period

    def __iter__(self) -> Iterator[int]:
        """Итератор для генерации бесконечной последовательности"""
        while True:
            yield self.next_int()

    def __str__(self) -> str:
        return f"LehmerGenerator(a={self.a}, c={self.c}, m={self.m}, seed={self.seed})"

    def __repr__(self) -> str:
        return (f"LehmerGenerator(seed={self.seed}, a={self.a}, c={self.c}, "
                f"m={self.m}, current={self.current})")
