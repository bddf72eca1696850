"""Tests for unit conversion and system selection."""

from __future__ import annotations

import random

import pytest

from souschef.measurement.conversion import (
    BASE_UNITS,
    are_units_compatible,
    best_unit_for_system,
    convert,
    convert_to_system,
    to_base,
    units_for_system,
)
from souschef.measurement.units import Unit, UnitCategory, UnitSystem, category, system
from souschef.models.recipe import Ingredient

US_UNITS = [unit for unit in Unit if system(unit) is UnitSystem.US]
METRIC_UNITS = [unit for unit in Unit if system(unit) is UnitSystem.METRIC]
NON_CONVERTIBLE = [Unit.PIECE, Unit.DOZEN, Unit.PINCH, Unit.DASH, Unit.TO_TASTE]


def _quantities(seed: int, count: int = 60):
    rng = random.Random(seed)
    return [rng.uniform(0.01, 5000) for _ in range(count)]


def test_identity_conversion_is_exact():
    for unit in Unit:
        assert convert(3.3333, unit, unit) == 3.3333


@pytest.mark.parametrize(
    "quantity, source, target, expected",
    [
        (1, Unit.CUP, Unit.MILLILITER, 236.588),
        (1, Unit.TABLESPOON, Unit.TEASPOON, 14.7868 / 4.92892),
        (2, Unit.POUND, Unit.OUNCE, 2 * 453.592 / 28.3495),
        (1500, Unit.GRAM, Unit.KILOGRAM, 1.5),
        (2, Unit.LITER, Unit.QUART, 2000 / 946.353),
        (16, Unit.OUNCE, Unit.GRAM, 16 * 28.3495),
    ],
)
def test_convert_known_factors(quantity, source, target, expected):
    assert convert(quantity, source, target) == pytest.approx(expected)


@pytest.mark.parametrize(
    "source, target",
    [
        (Unit.CUP, Unit.GRAM),
        (Unit.OUNCE, Unit.FLUID_OUNCE),
        (Unit.PIECE, Unit.DOZEN),
        (Unit.PINCH, Unit.TEASPOON),
        (Unit.GRAM, Unit.TO_TASTE),
    ],
)
def test_incompatible_conversion_returns_none(source, target):
    assert convert(1.0, source, target) is None
    assert are_units_compatible(source, target) is False


def test_compatibility_matrix():
    for first in Unit:
        for second in Unit:
            expected = first == second or (
                category(first) is category(second)
                and category(first) in (UnitCategory.VOLUME, UnitCategory.WEIGHT)
            )
            assert are_units_compatible(first, second) is expected


@pytest.mark.parametrize("unit", US_UNITS)
def test_us_metric_round_trip_within_one_percent(unit):
    for quantity in _quantities(seed=len(unit.value)):
        target = best_unit_for_system(quantity, unit, UnitSystem.METRIC)
        assert target is not None
        there = convert(quantity, unit, target)
        back = convert(there, target, unit)
        assert back == pytest.approx(quantity, rel=0.01)


@pytest.mark.parametrize("unit", METRIC_UNITS)
def test_metric_us_round_trip_within_one_percent(unit):
    for quantity in _quantities(seed=7):
        target = best_unit_for_system(quantity, unit, UnitSystem.US)
        assert target is not None
        back = convert(convert(quantity, unit, target), target, unit)
        assert back == pytest.approx(quantity, rel=0.01)


def test_same_system_round_trip_is_exact_to_float_precision():
    for quantity in _quantities(seed=11):
        there = convert(quantity, Unit.CUP, Unit.TABLESPOON)
        assert convert(there, Unit.TABLESPOON, Unit.CUP) == pytest.approx(quantity, rel=1e-12)


@pytest.mark.parametrize("unit", US_UNITS + METRIC_UNITS)
def test_system_conversion_preserves_category(unit):
    target_system = UnitSystem.METRIC if system(unit) is UnitSystem.US else UnitSystem.US
    for quantity in _quantities(seed=3, count=20):
        converted = convert_to_system(
            Ingredient(name="x", quantity=quantity, unit=unit), target_system
        )
        assert category(converted.unit) is category(unit)
        assert system(converted.unit) is target_system


@pytest.mark.parametrize(
    "quantity, unit, target_system, expected",
    [
        (10, Unit.MILLILITER, UnitSystem.US, Unit.TEASPOON),
        (14.7868, Unit.MILLILITER, UnitSystem.US, Unit.TABLESPOON),
        (59.1471, Unit.MILLILITER, UnitSystem.US, Unit.CUP),
        (1, Unit.LITER, UnitSystem.US, Unit.QUART),
        (5, Unit.LITER, UnitSystem.US, Unit.GALLON),
        (1, Unit.CUP, UnitSystem.METRIC, Unit.MILLILITER),
        (5, Unit.CUP, UnitSystem.METRIC, Unit.LITER),
        (8, Unit.OUNCE, UnitSystem.METRIC, Unit.GRAM),
        (3, Unit.POUND, UnitSystem.METRIC, Unit.KILOGRAM),
        (200, Unit.GRAM, UnitSystem.US, Unit.OUNCE),
        (500, Unit.GRAM, UnitSystem.US, Unit.POUND),
    ],
)
def test_best_unit_thresholds(quantity, unit, target_system, expected):
    assert best_unit_for_system(quantity, unit, target_system) is expected


@pytest.mark.parametrize("unit", NON_CONVERTIBLE)
def test_best_unit_undefined_for_count_and_special(unit):
    assert best_unit_for_system(3, unit, UnitSystem.METRIC) is None


def test_convert_to_system_converts_quantity():
    flour = Ingredient(name="flour", quantity=2, unit="cup", category="pantry")
    converted = convert_to_system(flour, UnitSystem.METRIC)
    assert converted.unit is Unit.MILLILITER
    assert converted.quantity == pytest.approx(473.176)
    assert converted.name == "flour"
    assert converted.category == flour.category


def test_convert_to_system_leaves_unconvertible_and_native_units():
    eggs = Ingredient(name="eggs", quantity=3, unit="piece")
    salt = Ingredient(name="salt", quantity=1, unit="pinch")
    milk = Ingredient(name="milk", quantity=250, unit="ml")
    assert convert_to_system(eggs, UnitSystem.METRIC) == eggs
    assert convert_to_system(salt, UnitSystem.US) == salt
    assert convert_to_system(milk, UnitSystem.METRIC) == milk


def test_units_for_system():
    assert units_for_system(UnitSystem.METRIC) == [
        Unit.MILLILITER,
        Unit.LITER,
        Unit.GRAM,
        Unit.KILOGRAM,
    ]
    us_units = units_for_system(UnitSystem.US)
    assert us_units[0] is Unit.TEASPOON
    assert us_units[-2:] == [Unit.OUNCE, Unit.POUND]
    assert Unit.FLUID_OUNCE not in us_units


@pytest.mark.parametrize("unit", US_UNITS + METRIC_UNITS)
def test_to_base_matches_conversion_to_base_unit(unit):
    assert to_base(3, unit) == pytest.approx(convert(3, unit, BASE_UNITS[category(unit)]))


@pytest.mark.parametrize("unit", NON_CONVERTIBLE)
def test_to_base_undefined_for_count_and_special(unit):
    assert to_base(3, unit) is None
