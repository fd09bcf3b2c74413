import pytest

from lehmer.entities import (
    GeneratorParameters,
    InvalidParameter,
    LehmerGenerator,
    OptimalLehmerGenerator,
)
from lehmer.hull_conditions import check_hull_conditions


class TestGeneratorParameters:
    """Проверка диапазонов параметров"""

    def test_valid(self):
        params = GeneratorParameters(a=21, c=3, m=64)
        assert (params.a, params.c, params.m) == (21, 3, 64)

    def test_zero_modulus(self):
        with pytest.raises(InvalidParameter) as exc:
            GeneratorParameters(a=0, c=0, m=0)
        assert exc.value.name == "m"

    @pytest.mark.parametrize("a, c", [(16, 3), (-1, 3), (5, 16), (5, -2)])
    def test_out_of_range(self, a, c):
        with pytest.raises(InvalidParameter):
            GeneratorParameters(a=a, c=c, m=16)

    def test_immutable(self):
        params = GeneratorParameters(a=5, c=1, m=16)
        with pytest.raises(AttributeError):
            params.a = 3


class TestLehmerGenerator:
    """Проверка генератора"""

    def test_first_values(self):
        gen = LehmerGenerator(seed=0, a=5, c=3, m=16)
        assert gen.generate_sequence(3) == [3, 2, 13]
        assert gen.current == 13

    def test_multiplier_must_be_reduced(self):
        # a = 21 проходит проверку Халла-Добелла, но для генератора нужен a < m;
        # 21 mod 16 = 5 дает ту же последовательность
        assert check_hull_conditions(21, 3, 16).all_conditions_met
        with pytest.raises(InvalidParameter):
            LehmerGenerator(seed=0, a=21, c=3, m=16)
        assert LehmerGenerator(seed=0, a=21 % 16, c=3, m=16).generate_sequence(3) == [3, 2, 13]

    def test_construction_errors(self):
        with pytest.raises(InvalidParameter):
            LehmerGenerator(seed=0, a=0, c=0, m=0)
        with pytest.raises(InvalidParameter) as exc:
            LehmerGenerator(seed=0, a=16, c=3, m=16)
        assert exc.value.name == "a"
        with pytest.raises(InvalidParameter) as exc:
            LehmerGenerator(seed=16, a=5, c=3, m=16)
        assert exc.value.name == "seed"

    def test_invalid_parameter_is_value_error(self):
        with pytest.raises(ValueError):
            LehmerGenerator(seed=-1, a=5, c=3, m=16)

    def test_accessors(self):
        gen = LehmerGenerator(seed=7, a=5, c=3, m=16)
        assert (gen.a, gen.c, gen.m, gen.seed, gen.current) == (5, 3, 16, 7, 7)
        assert gen.params == GeneratorParameters(5, 3, 16)

    def test_defaults_are_park_miller(self):
        gen = LehmerGenerator()
        assert (gen.a, gen.c, gen.m) == (16807, 0, 2**31 - 1)
        assert gen.next_int() == 16807

    def test_next_float_in_unit_interval(self):
        gen = LehmerGenerator(seed=0, a=5, c=3, m=16)
        assert gen.next_float() == 3 / 16
        for value in gen.generate_float_sequence(100):
            assert 0.0 <= value < 1.0

    def test_determinism(self):
        gen1 = LehmerGenerator(seed=12345, a=1664525, c=1013904223, m=2**32)
        gen2 = LehmerGenerator(seed=12345, a=1664525, c=1013904223, m=2**32)
        assert gen1.generate_sequence(500) == gen2.generate_sequence(500)

    def test_large_parameters_do_not_wrap(self):
        m = 2**64
        gen = LehmerGenerator(seed=m - 1, a=6364136223846793005, c=1442695040888963407, m=m)
        expected = (6364136223846793005 * (m - 1) + 1442695040888963407) % m
        assert gen.next_int() == expected

    def test_reset_and_set_seed(self):
        gen = LehmerGenerator(seed=1, a=5, c=1, m=16)
        first = gen.generate_sequence(5)
        gen.reset()
        assert gen.generate_sequence(5) == first
        gen.set_seed(0)
        assert gen.seed == 0
        assert gen.next_int() == 1
        with pytest.raises(InvalidParameter):
            gen.set_seed(16)

    def test_iterator(self):
        gen = LehmerGenerator(seed=0, a=5, c=3, m=16)
        it = iter(gen)
        assert [next(it) for _ in range(3)] == [3, 2, 13]

    def test_full_period_visits_every_value(self):
        for a, c, m in [(5, 3, 16), (5, 1, 16), (4, 1, 9), (21, 3, 1000), (0, 0, 1)]:
            assert check_hull_conditions(a, c, m).all_conditions_met
            for seed in range(min(m, 20)):
                gen = LehmerGenerator(seed=seed, a=a, c=c, m=m)
                values = gen.generate_sequence(m)
                assert sorted(values) == list(range(m))
                assert values[-1] == seed

    def test_get_period(self):
        assert LehmerGenerator(seed=0, a=5, c=3, m=16).get_period() == 16
        assert LehmerGenerator(seed=1, a=3, c=5, m=16).get_period() == 8
        # начальное значение 1 не лежит на цикле 2 -> 4 -> 8 -> 6
        assert LehmerGenerator(seed=1, a=2, c=0, m=10).get_period() == 4

    def test_get_period_not_found(self):
        gen = LehmerGenerator(seed=0, a=5, c=3, m=16)
        gen.next_int()
        assert gen.get_period(max_iterations=5) == -1
        assert gen.current == 3

    def test_check_hull(self):
        assert LehmerGenerator(seed=0, a=5, c=3, m=16).check_hull().all_conditions_met
        assert not LehmerGenerator(seed=1, a=2, c=0, m=10).check_hull().coprime_ok

    def test_str(self):
        gen = LehmerGenerator(seed=1, a=5, c=1, m=16)
        assert str(gen) == "LehmerGenerator(a=5, c=1, m=16, seed=1)"

    def test_reduced_multiplier_gives_full_cycle(self):
        report = check_hull_conditions(21, 3, 16)
        assert report.all_conditions_met
        gen = LehmerGenerator(seed=0, a=21 % 16, c=3, m=16)
        values = gen.generate_sequence(16)
        assert values[:3] == [3, 2, 13]
        assert sorted(values) == list(range(16))


class TestOptimalLehmerGenerator:

    def test_unknown_type(self):
        with pytest.raises(ValueError, match="generator_type"):
            OptimalLehmerGenerator(generator_type="unknown")

    @pytest.mark.parametrize("generator_type", ["mixed_numerical", "mixed_borland", "mixed_microsoft"])
    def test_mixed_sets_have_full_period(self, generator_type):
        gen = OptimalLehmerGenerator(seed=1, generator_type=generator_type)
        assert gen.is_full_period()
        assert gen.get_theoretical_period() == gen.m == 2**32

    def test_multiplicative(self):
        gen = OptimalLehmerGenerator(seed=1)
        assert not gen.is_full_period()
        assert gen.get_theoretical_period() == 2**31 - 2

    def test_available_types(self):
        assert "multiplicative" in OptimalLehmerGenerator.available_types()
        assert len(OptimalLehmerGenerator.available_types()) == 4

    def test_theoretical_period_follows_hull_conditions(self):
        for generator_type in OptimalLehmerGenerator.available_types():
            gen = OptimalLehmerGenerator(generator_type=generator_type)
            if gen.is_full_period():
                assert gen.get_theoretical_period() == gen.m
            else:
                assert gen.c == 0
                assert gen.get_theoretical_period() == gen.m - 1
