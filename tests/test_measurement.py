import itertools

import pytest

from cookbook.units.measurement import (
    MeasurementUnit,
    UnitFamily,
    celsius_to_fahrenheit,
    convert,
    fahrenheit_to_celsius,
    from_base_unit,
    to_base_unit,
)

VOLUME = [u for u in MeasurementUnit if u.family is UnitFamily.VOLUME]
WEIGHT = [u for u in MeasurementUnit if u.family is UnitFamily.WEIGHT]


def test_cup_to_milliliter():
    assert convert(1, MeasurementUnit.CUP, MeasurementUnit.MILLILITER) == 250.0


def test_known_factors():
    assert convert(2, MeasurementUnit.TABLESPOON, MeasurementUnit.MILLILITER) == pytest.approx(30)
    assert convert(1, MeasurementUnit.POUND, MeasurementUnit.OUNCE) == pytest.approx(15)
    assert convert(1.5, MeasurementUnit.KILOGRAM, MeasurementUnit.GRAM) == pytest.approx(1500)
    assert convert(1, MeasurementUnit.DASH, MeasurementUnit.MILLILITER) == pytest.approx(0.625)
    assert convert(10, MeasurementUnit.PINCH, MeasurementUnit.GRAM) == pytest.approx(3)


def test_families():
    assert MeasurementUnit.DASH.family is UnitFamily.VOLUME
    assert MeasurementUnit.PINCH.family is UnitFamily.WEIGHT
    assert MeasurementUnit.SMIDGEN.family is UnitFamily.WEIGHT
    assert len(VOLUME) + len(WEIGHT) == len(MeasurementUnit) == 20


@pytest.mark.parametrize("family", [VOLUME, WEIGHT])
def test_round_trip_same_family(family):
    for a, b in itertools.product(family, repeat=2):
        there = convert(3.7, a, b)
        assert convert(there, b, a) == pytest.approx(3.7)


def test_cross_family_is_undefined():
    for a, b in itertools.product(WEIGHT, VOLUME):
        assert convert(1, a, b) is None
        assert convert(1, b, a) is None


def test_tiny_values_are_zero():
    assert to_base_unit(1e-12, MeasurementUnit.CUP) == 0.0
    assert from_base_unit(-1e-11, MeasurementUnit.CUP) == 0.0
    assert convert(0, MeasurementUnit.GALLON, MeasurementUnit.TEASPOON) == 0.0


def test_from_text():
    assert MeasurementUnit.from_text("ml") is MeasurementUnit.MILLILITER
    assert MeasurementUnit.from_text("CC") is MeasurementUnit.MILLILITER
    assert MeasurementUnit.from_text("Tablespoons") is MeasurementUnit.TABLESPOON
    assert MeasurementUnit.from_text("cups") is MeasurementUnit.CUP
    assert MeasurementUnit.from_text("fl. oz.") is MeasurementUnit.FLUID_OUNCE
    assert MeasurementUnit.from_text("pinches") is MeasurementUnit.PINCH
    assert MeasurementUnit.from_text("lbs") is MeasurementUnit.POUND
    with pytest.raises(ValueError):
        MeasurementUnit.from_text("handful")


def test_temperature():
    assert celsius_to_fahrenheit(100) == pytest.approx(212)
    assert fahrenheit_to_celsius(350) == pytest.approx(176.6667, rel=1e-4)
