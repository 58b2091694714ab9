"""
Tests for food placement.
"""

import random
from collections import Counter

from snaketick.game.food import FoodPlacer
from snaketick.game.primitives import NO_FOOD, Point


CANDIDATES = [Point(0, 0), Point(3, 1), Point(2, 2), Point(1, 4)]


class TestFoodPlacer:
    """Tests for FoodPlacer."""

    def test_no_candidates_gives_sentinel(self, first_choice_rng):
        placer = FoodPlacer(first_choice_rng)

        assert placer.place([]) == NO_FOOD

    def test_index_is_floor_of_scaled_draw(self, make_rng):
        assert FoodPlacer(make_rng(0.0)).place(CANDIDATES) == Point(0, 0)
        assert FoodPlacer(make_rng(0.49)).place(CANDIDATES) == Point(3, 1)
        assert FoodPlacer(make_rng(0.5)).place(CANDIDATES) == Point(2, 2)
        assert FoodPlacer(make_rng(0.999)).place(CANDIDATES) == Point(1, 4)

    def test_draw_of_one_stays_in_range(self, make_rng):
        assert FoodPlacer(make_rng(1.0)).place(CANDIDATES) == Point(1, 4)

    def test_one_draw_per_placement(self, first_choice_rng):
        placer = FoodPlacer(first_choice_rng)
        placer.place(CANDIDATES)

        assert first_choice_rng.calls == 1

    def test_random_point_covers_board(self, make_rng):
        assert FoodPlacer(make_rng(0.0)).random_point(5, 3) == Point(0, 0)
        assert FoodPlacer(make_rng(0.99)).random_point(5, 3) == Point(4, 2)

    def test_uniform_choice(self):
        placer = FoodPlacer(random.Random(2024))

        counts = Counter(placer.place(CANDIDATES) for _ in range(4000))

        assert set(counts) == set(CANDIDATES)
        for point in CANDIDATES:
            assert 850 < counts[point] < 1150

    def test_seed_is_repeatable(self):
        first = [FoodPlacer(seed=5).place(CANDIDATES) for _ in range(3)]
        second = [FoodPlacer(seed=5).place(CANDIDATES) for _ in range(3)]

        assert first == second
