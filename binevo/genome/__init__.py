from binevo.genome.chromosome import MAX_CHROMOSOME_LENGTH, Chromosome
from binevo.genome.individual import Individual

__all__ = ["Chromosome", "Individual", "MAX_CHROMOSOME_LENGTH"]
