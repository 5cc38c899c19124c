"""Tests for binevo.evolution.population.Population."""

import pytest

from binevo.evolution.population import Population, better_than
from binevo.exceptions import EmptyPopulationError, FitnessNotEvaluatedError
from binevo.genome import Individual


class TestDiversity:
    def test_identical_chromosomes(self, make_population) -> None:
        population = make_population(["1010"] * 5, [1.0] * 5)
        assert population.diversity() == 0.0

    def test_complementary_pair(self, make_population) -> None:
        population = make_population(["0000", "1111"], [0.0, 1.0])
        assert population.diversity() == pytest.approx(1.0)

    def test_mean_over_all_pairs(self, make_population) -> None:
        # pair distances: 0.5, 1.0, 0.5
        population = make_population(["00", "01", "11"], [0.0, 1.0, 2.0])
        assert population.diversity() == pytest.approx(2.0 / 3.0)

    @pytest.mark.parametrize("bits", [[], ["0101"]])
    def test_fewer_than_two_members(self, make_population, bits) -> None:
        assert make_population(bits, [1.0] * len(bits)).diversity() == 0.0


class TestOrdering:
    def test_best_and_worst_follow_direction(self, make_population) -> None:
        values = [3.0, -1.0, 7.0]
        maximizing = make_population(["00", "01", "10"], values)
        minimizing = make_population(["00", "01", "10"], values, is_maximization=False)

        assert maximizing.best().fitness == 7.0
        assert maximizing.worst().fitness == -1.0
        assert minimizing.best().fitness == -1.0
        assert minimizing.worst().fitness == 7.0

    def test_sort_is_stable_and_best_first(self, make_population) -> None:
        population = make_population(["00", "01", "10", "11"], [1.0, 2.0, 2.0, 0.0])
        population.sort_by_fitness()
        assert [str(ind) for ind in population] == ["01", "10", "00", "11"]

    def test_sorted_by_fitness_leaves_order(self, make_population) -> None:
        population = make_population(["00", "01"], [1.0, 2.0], is_maximization=False)
        assert [ind.fitness for ind in population.sorted_by_fitness()] == [1.0, 2.0]
        population = make_population(["00", "01"], [1.0, 2.0])
        population.sorted_by_fitness()
        assert [ind.fitness for ind in population] == [1.0, 2.0]

    def test_empty_population_has_no_best(self) -> None:
        with pytest.raises(EmptyPopulationError):
            Population().best()
        with pytest.raises(EmptyPopulationError):
            Population().worst()

    def test_unevaluated_members_are_reported(self) -> None:
        population = Population([Individual.from_string("01")])
        assert len(population.unevaluated()) == 1
        with pytest.raises(FitnessNotEvaluatedError):
            population.fitness_values()

    def test_better_than(self) -> None:
        assert better_than(2.0, 1.0, True)
        assert better_than(1.0, 2.0, False)
        assert not better_than(1.0, 1.0, True)
