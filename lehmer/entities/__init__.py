from .lehmer_generator import GeneratorParameters, InvalidParameter, LehmerGenerator
from .optimal_lehmer_generator import OptimalLehmerGenerator

__all__ = ['GeneratorParameters', 'InvalidParameter', 'LehmerGenerator', 'OptimalLehmerGenerator']
