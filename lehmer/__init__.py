from .entities import GeneratorParameters, InvalidParameter, LehmerGenerator, OptimalLehmerGenerator
from .hull_conditions import HullReport, check_hull_conditions, expected_period, find_optimal_parameters
from .number_theory import gcd, get_prime_factors

__all__ = [
    'GeneratorParameters', 'InvalidParameter', 'LehmerGenerator', 'OptimalLehmerGenerator',
    'HullReport', 'check_hull_conditions', 'expected_period', 'find_optimal_parameters',
    'gcd', 'get_prime_factors',
]
