"""Volume and weight unit conversion.

Every unit converts linearly to the base unit of its family (liter for
volume, gram for weight); unit-to-unit conversion always goes through the
base. The factors are kitchen approximations (1 cup = 0.25 l, 1 oz = 30 g).
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple

# Values closer to zero than this are treated as exactly zero.
ZERO_THRESHOLD = 1e-10


class UnitFamily(Enum):
    VOLUME = "liter"
    WEIGHT = "gram"


class MeasurementUnit(Enum):
    # Volume metric
    MILLILITER = "milliliter"
    CENTILITER = "centiliter"
    DECILITER = "deciliter"
    LITER = "liter"
    # Volume imperial
    TEASPOON = "teaspoon"
    TABLESPOON = "tablespoon"
    CUP = "cup"
    PINT = "pint"
    QUART = "quart"
    GALLON = "gallon"
    GILL = "gill"
    FLUID_OUNCE = "fluid ounce"
    # Weight metric
    MILLIGRAM = "milligram"
    GRAM = "gram"
    KILOGRAM = "kilogram"
    # Weight imperial
    OUNCE = "ounce"
    POUND = "pound"
    # Other
    PINCH = "pinch"
    DASH = "dash"
    SMIDGEN = "smidgen"

    @property
    def family(self) -> UnitFamily:
        return _FACTORS[self][2]

    @property
    def aliases(self) -> Tuple[str, ...]:
        return _ALIASES[self]

    @classmethod
    def from_text(cls, text: str) -> "MeasurementUnit":
        """Resolve a unit name or abbreviation such as "tbsp" or "Cups".

        Raises ValueError for unknown units.
        """
        word = " ".join(text.lower().replace(".", " ").split())
        candidates = [word]
        if word.endswith("es"):
            candidates.append(word[:-2])
        if word.endswith("s"):
            candidates.append(word[:-1])
        for candidate in candidates:
            unit = _BY_ALIAS.get(candidate)
            if unit is not None:
                return unit
        raise ValueError(f"Unknown measurement unit: {text!r}")


# unit -> (multiplier, divisor, family); base value = value * multiplier / divisor
_FACTORS: Dict[MeasurementUnit, Tuple[float, float, UnitFamily]] = {
    MeasurementUnit.MILLILITER: (1, 1000, UnitFamily.VOLUME),
    MeasurementUnit.CENTILITER: (1, 100, UnitFamily.VOLUME),
    MeasurementUnit.DECILITER: (1, 10, UnitFamily.VOLUME),
    MeasurementUnit.LITER: (1, 1, UnitFamily.VOLUME),
    MeasurementUnit.TEASPOON: (0.005, 1, UnitFamily.VOLUME),
    MeasurementUnit.TABLESPOON: (0.015, 1, UnitFamily.VOLUME),
    MeasurementUnit.CUP: (0.25, 1, UnitFamily.VOLUME),
    MeasurementUnit.PINT: (0.5, 1, UnitFamily.VOLUME),
    MeasurementUnit.QUART: (0.946, 1, UnitFamily.VOLUME),
    MeasurementUnit.GALLON: (3.8, 1, UnitFamily.VOLUME),
    MeasurementUnit.GILL: (0.17, 1, UnitFamily.VOLUME),
    MeasurementUnit.FLUID_OUNCE: (0.03, 1, UnitFamily.VOLUME),
    MeasurementUnit.DASH: (0.000625, 1, UnitFamily.VOLUME),
    MeasurementUnit.MILLIGRAM: (1, 1000, UnitFamily.WEIGHT),
    MeasurementUnit.GRAM: (1, 1, UnitFamily.WEIGHT),
    MeasurementUnit.KILOGRAM: (1000, 1, UnitFamily.WEIGHT),
    MeasurementUnit.OUNCE: (30, 1, UnitFamily.WEIGHT),
    MeasurementUnit.POUND: (450, 1, UnitFamily.WEIGHT),
    MeasurementUnit.PINCH: (0.3, 1, UnitFamily.WEIGHT),
    MeasurementUnit.SMIDGEN: (0.15, 1, UnitFamily.WEIGHT),
}

_ALIASES: Dict[MeasurementUnit, Tuple[str, ...]] = {
    MeasurementUnit.MILLILITER: ("milliliter", "millilitre", "ml", "cc"),
    MeasurementUnit.CENTILITER: ("centiliter", "centilitre", "cl"),
    MeasurementUnit.DECILITER: ("deciliter", "decilitre", "dl"),
    MeasurementUnit.LITER: ("liter", "litre", "l"),
    MeasurementUnit.TEASPOON: ("teaspoon", "tsp"),
    MeasurementUnit.TABLESPOON: ("tablespoon", "tbsp"),
    MeasurementUnit.CUP: ("cup", "c"),
    MeasurementUnit.PINT: ("pint", "pt"),
    MeasurementUnit.QUART: ("quart", "qt"),
    MeasurementUnit.GALLON: ("gallon", "gal"),
    MeasurementUnit.GILL: ("gill", "gi"),
    MeasurementUnit.FLUID_OUNCE: ("fluid ounce", "fl oz"),
    MeasurementUnit.MILLIGRAM: ("milligram", "mg"),
    MeasurementUnit.GRAM: ("gram", "g"),
    MeasurementUnit.KILOGRAM: ("kilogram", "kg"),
    MeasurementUnit.OUNCE: ("ounce", "oz"),
    MeasurementUnit.POUND: ("pound", "lb"),
    MeasurementUnit.PINCH: ("pinch",),
    MeasurementUnit.DASH: ("dash",),
    MeasurementUnit.SMIDGEN: ("smidgen",),
}

_BY_ALIAS: Dict[str, MeasurementUnit] = {
    alias: unit for unit, aliases in _ALIASES.items() for alias in aliases
}


def to_base_unit(value: float, unit: MeasurementUnit) -> float:
    if abs(value) < ZERO_THRESHOLD:
        return 0.0
    multiplier, divisor, _ = _FACTORS[unit]
    return value * multiplier / divisor


def from_base_unit(value: float, unit: MeasurementUnit) -> float:
    if abs(value) < ZERO_THRESHOLD:
        return 0.0
    multiplier, divisor, _ = _FACTORS[unit]
    return value * divisor / multiplier


def convert(
    value: float, from_unit: MeasurementUnit, to_unit: MeasurementUnit
) -> Optional[float]:
    """Convert between two units of the same family.

    Returns None when the units belong to different families (volume vs
    weight); callers must check for it.
    """
    if from_unit.family is not to_unit.family:
        return None
    return from_base_unit(to_base_unit(value, from_unit), to_unit)


class TemperatureUnit(Enum):
    FAHRENHEIT = "fahrenheit"
    CELSIUS = "celsius"

    @property
    def aliases(self) -> Tuple[str, ...]:
        return (self.value, self.value[0])


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9.0 / 5.0 + 32.0


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    return (fahrenheit - 32.0) * 5.0 / 9.0
