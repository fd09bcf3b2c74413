from ..hull_conditions import expected_period
from .lehmer_generator import LehmerGenerator


class OptimalLehmerGenerator(LehmerGenerator):
    """
    Генератор с известными параметрами из литературы

    Для смешанных наборов период m гарантируют условия Халла-Добелла.
    Мультипликативный набор (c = 0) этим условиям не удовлетворяет: при простом m
    и первообразном корне a его период равен m - 1.
    """

    PRESETS = {
        "multiplicative": (16807, 0, 2**31 - 1),                # Park & Miller, a = 7^5
        "mixed_numerical": (1664525, 1013904223, 2**32),        # Numerical Recipes
        "mixed_borland": (22695477, 1, 2**32),                  # Borland C++
        "mixed_microsoft": (214013, 2531011, 2**32),            # Microsoft C
    }

    def __init__(self, seed: int = 1, generator_type: str = "multiplicative"):
        """
        Args:
            seed: начальное значение
            generator_type: имя набора из PRESETS
        """
        if generator_type not in self.PRESETS:
            raise ValueError(f"generator_type должен быть одним из: {', '.join(self.PRESETS)}")

        a, c, m = self.PRESETS[generator_type]
        super().__init__(seed=seed, a=a, c=c, m=m)
        self.generator_type = generator_type

    def get_theoretical_period(self) -> int:
        """Теоретический максимальный период для параметров набора"""
        period = expected_period(self.a, self.c, self.m)
        if period is None:
            # единственный набор без полного периода - мультипликативный
            return self.m - 1
        return period

    def is_full_period(self) -> bool:
        """Период совпадает с модулем m (выполнены условия Халла-Добелла)"""
        return self.check_hull().all_conditions_met

    @classmethod
    def available_types(cls) -> list[str]:
        return list(cls.PRESETS)
