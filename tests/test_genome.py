"""Tests for binevo.genome: bit decoding, immutability and fitness caching."""

import numpy as np
import pytest

from binevo.exceptions import (
    ChromosomeLengthError,
    FitnessNotEvaluatedError,
    OperatorError,
    StateError,
)
from binevo.genome import Chromosome, Individual


class TestChromosomeDecode:
    @pytest.mark.parametrize(
        ("bits", "expected"),
        [("0000", 0.0), ("1111", 15.0), ("1000", 8.0), ("0001", 1.0)],
    )
    def test_four_bits_over_0_15(self, bits: str, expected: float) -> None:
        assert Chromosome.from_string(bits).decode(0.0, 15.0) == pytest.approx(expected)

    @pytest.mark.parametrize("length", [1, 8, 20, 64])
    def test_all_zeros_is_min_and_all_ones_is_max(self, length: int) -> None:
        zeros = Chromosome.zeros(length)
        ones = Chromosome(np.ones(length, dtype=bool))
        assert zeros.decode(-10.0, 10.0) == -10.0
        assert ones.decode(-10.0, 10.0) == pytest.approx(10.0)

    def test_msb_first(self) -> None:
        assert Chromosome.from_string("100").to_int() == 4
        assert Chromosome.from_string("001").to_int() == 1

    def test_decode_stays_in_domain(self, rng: np.random.Generator) -> None:
        for _ in range(50):
            x = Chromosome.random(12, rng).decode(-3.0, 7.0)
            assert -3.0 <= x <= 7.0


class TestChromosome:
    def test_from_string_rejects_non_bits(self) -> None:
        with pytest.raises(OperatorError):
            Chromosome.from_string("10a1")

    def test_bits_are_read_only(self) -> None:
        chromosome = Chromosome.from_string("1010")
        with pytest.raises(ValueError):
            chromosome.bits[0] = False

    def test_flip_returns_new_chromosome(self) -> None:
        original = Chromosome.from_string("1010")
        flipped = original.flip([True, False, False, True])
        assert str(flipped) == "0011"
        assert str(original) == "1010"

    def test_flip_mask_length_mismatch(self) -> None:
        with pytest.raises(ChromosomeLengthError):
            Chromosome.from_string("1010").flip([True, False])

    def test_hamming_distance(self) -> None:
        a = Chromosome.from_string("1100")
        b = Chromosome.from_string("1010")
        assert a.hamming_distance(b) == 2
        with pytest.raises(ChromosomeLengthError):
            a.hamming_distance(Chromosome.from_string("1"))

    def test_equality_and_hash(self) -> None:
        a = Chromosome.from_string("0110")
        b = Chromosome([False, True, True, False])
        assert a == b
        assert len({a, b}) == 1


class TestIndividual:
    def test_unevaluated_fitness_raises(self) -> None:
        individual = Individual.from_string("0101")
        assert not individual.is_evaluated
        with pytest.raises(FitnessNotEvaluatedError):
            _ = individual.fitness
        # part of the state-error family
        with pytest.raises(StateError):
            _ = individual.fitness

    def test_chromosome_assignment_invalidates(self) -> None:
        individual = Individual.from_string("0101")
        individual.fitness = 3.0
        individual.fitness_percentage = 80.0

        individual.chromosome = Chromosome.from_string("0101")

        assert not individual.is_evaluated
        assert individual.fitness_percentage == 0.0

    def test_copy_keeps_cache_and_is_independent(self) -> None:
        individual = Individual.from_string("1111")
        individual.fitness = 2.5
        clone = individual.copy()

        assert clone.fitness == 2.5
        clone.chromosome = Chromosome.zeros(4)
        assert str(individual) == "1111"
        assert individual.fitness == 2.5

    @pytest.mark.parametrize(("value", "stored"), [(-5.0, 0.0), (42.0, 42.0), (130.0, 100.0)])
    def test_percentage_is_clamped(self, value: float, stored: float) -> None:
        individual = Individual.from_string("1")
        individual.fitness_percentage = value
        assert individual.fitness_percentage == stored
