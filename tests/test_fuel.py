"""Tests for the pure fuel formulas (core/fuel.py).

Every test is a pure function call — no I/O, no mocking, no side
effects.  These tests exercise:

* The simple formula on the worked examples and small masses
* The compound formula and its increment sequence
* Invariants (non-negativity, compound >= simple, termination)
"""

from __future__ import annotations

import math

import pytest

from aoc2019.core.fuel import compound_fuel, fuel, fuel_increments


# ---------------------------------------------------------------------------
# fuel
# ---------------------------------------------------------------------------

class TestFuel:
    @pytest.mark.parametrize(
        ("mass", "expected"),
        [
            (12, 2),
            (14, 2),
            (1969, 654),
            (100756, 33583),
            (1, 0),
        ],
    )
    def test_worked_examples(self, mass: int, expected: int) -> None:
        assert fuel(mass) == expected

    @pytest.mark.parametrize("mass", range(0, 9))
    def test_small_masses_need_no_fuel(self, mass: int) -> None:
        assert fuel(mass) == 0

    def test_nine_is_smallest_mass_needing_fuel(self) -> None:
        assert fuel(9) == 1

    @pytest.mark.parametrize("mass", [-1, -3, -100, -100756])
    def test_negative_mass_clamped_to_zero(self, mass: int) -> None:
        assert fuel(mass) == 0

    def test_never_negative(self) -> None:
        assert all(fuel(m) >= 0 for m in range(-50, 500))


# ---------------------------------------------------------------------------
# fuel_increments
# ---------------------------------------------------------------------------

class TestFuelIncrements:
    def test_sequence_for_1969(self) -> None:
        assert list(fuel_increments(1969)) == [654, 216, 70, 21, 5]

    def test_zero_increment_not_yielded(self) -> None:
        assert list(fuel_increments(14)) == [2]

    def test_empty_when_no_fuel_needed(self) -> None:
        assert list(fuel_increments(8)) == []

    def test_strictly_decreasing(self) -> None:
        steps = list(fuel_increments(100756))
        assert all(a > b for a, b in zip(steps, steps[1:]))

    @pytest.mark.parametrize("mass", [10**3, 10**9, 10**30])
    def test_logarithmic_length(self, mass: int) -> None:
        steps = list(fuel_increments(mass))
        assert len(steps) <= math.ceil(math.log(mass, 3)) + 1


# ---------------------------------------------------------------------------
# compound_fuel
# ---------------------------------------------------------------------------

class TestCompoundFuel:
    @pytest.mark.parametrize(
        ("mass", "expected"),
        [
            (14, 2),
            (1969, 966),
            (100756, 50346),
            (8, 0),
            (9, 1),
            (33583, 16763),
        ],
    )
    def test_worked_examples(self, mass: int, expected: int) -> None:
        assert compound_fuel(mass) == expected

    def test_negative_mass(self) -> None:
        assert compound_fuel(-42) == 0

    @pytest.mark.parametrize("mass", [0, 5, 12, 14, 21, 100, 1969, 100756])
    def test_at_least_simple_fuel(self, mass: int) -> None:
        assert compound_fuel(mass) >= fuel(mass)

    @pytest.mark.parametrize("mass", range(0, 200))
    def test_equal_to_simple_fuel_iff_second_order_is_zero(
        self, mass: int,
    ) -> None:
        equal = compound_fuel(mass) == fuel(mass)
        assert equal == (fuel(fuel(mass)) == 0)
