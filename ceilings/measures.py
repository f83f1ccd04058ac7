"""Named length, area and angle units and conversions between them.

Every unit is a linear factor relative to the base unit of its family:
metre for lengths, square metre for areas and radian for angles.  Stored
geometry is always expressed in base units; the measures only decide how
values are accepted from and presented to a caller.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Type, TypeVar

from .errors import MeasureFamilyError, UnknownUnitError

M = TypeVar("M", bound="Measure")


@dataclass(frozen=True)
class Measure:
    """A unit: short ``name`` and positive ``factor`` relative to the base unit."""

    name: str
    factor: float

    family = "measure"

    def __post_init__(self) -> None:
        object.__setattr__(self, "factor", float(self.factor))
        if not self.factor > 0.0:
            raise ValueError(f"measure {self.name!r} must have a positive factor, got {self.factor}")

    def __str__(self) -> str:
        return self.name


class LengthMeasure(Measure):
    family = "length"


class AreaMeasure(Measure):
    family = "area"


class AngleMeasure(Measure):
    family = "angle"


METRE = LengthMeasure("m", 1)
DECIMETRE = LengthMeasure("dm", 0.1)
CENTIMETRE = LengthMeasure("cm", 0.01)
MILLIMETRE = LengthMeasure("mm", 0.001)
KILOMETRE = LengthMeasure("km", 1000)
YARD = LengthMeasure("yd", 0.9144)
INCH = LengthMeasure("in", 0.0254)
MILE = LengthMeasure("mi", 1609.34)
FOOT = LengthMeasure("ft", 0.3048)

METRE2 = AreaMeasure("m2", 1)
DECIMETRE2 = AreaMeasure("dm2", 0.01)
CENTIMETRE2 = AreaMeasure("cm2", 0.0001)
MILLIMETRE2 = AreaMeasure("mm2", 1e-6)
KILOMETRE2 = AreaMeasure("km2", 1e6)
YARD2 = AreaMeasure("yd2", 0.83612736)
INCH2 = AreaMeasure("in2", 0.00064516)
MILE2 = AreaMeasure("mi2", 2.59e6)
FOOT2 = AreaMeasure("ft2", 0.09290304)

RADIAN = AngleMeasure("rad", 1)
DEGREE = AngleMeasure("deg", 2 * math.pi / 360)

LENGTH_MEASURES: Dict[str, LengthMeasure] = {
    m.name: m
    for m in (METRE, DECIMETRE, CENTIMETRE, MILLIMETRE, KILOMETRE, YARD, INCH, MILE, FOOT)
}
AREA_MEASURES: Dict[str, AreaMeasure] = {
    m.name: m
    for m in (METRE2, DECIMETRE2, CENTIMETRE2, MILLIMETRE2, KILOMETRE2, YARD2, INCH2, MILE2, FOOT2)
}
ANGLE_MEASURES: Dict[str, AngleMeasure] = {m.name: m for m in (RADIAN, DEGREE)}

BASE_MEASURES: Dict[Type[Measure], Measure] = {
    LengthMeasure: METRE,
    AreaMeasure: METRE2,
    AngleMeasure: RADIAN,
}


def round_half_away(value: float, precision: int = 0) -> float:
    """Round ``value`` to ``precision`` decimals, ties away from zero."""

    value = float(value)
    if not math.isfinite(value):
        return value
    scale = 10.0 ** precision
    scaled = abs(value) * scale
    floored = math.floor(scaled)
    rounded = floored + 1 if scaled - floored >= 0.5 else floored
    return math.copysign(rounded, value) / scale


def _check_family(a: Measure, b: Measure) -> None:
    if type(a) is not type(b):
        raise MeasureFamilyError(
            f"cannot convert between {a.family} unit {a.name!r} and {b.family} unit {b.name!r}"
        )


def convert(a: Measure, b: Measure, value: float) -> float:
    """Convert ``value`` expressed in ``a`` into ``b``."""

    _check_family(a, b)
    return value * a.factor / b.factor


def convert_round(a: Measure, b: Measure, value: float, precision: int) -> float:
    return round_half_away(convert(a, b, value), precision)


def base_measure(measure: Measure) -> Measure:
    return BASE_MEASURES[type(measure)]


def convert_to_base(measure: Measure, value: float) -> float:
    return convert(measure, base_measure(measure), value)


def convert_from_base(measure: Measure, value: float) -> float:
    return convert(base_measure(measure), measure, value)


def convert_to_base_round(measure: Measure, value: float, precision: int) -> float:
    return round_half_away(convert_to_base(measure, value), precision)


def convert_from_base_round(measure: Measure, value: float, precision: int) -> float:
    return round_half_away(convert_from_base(measure, value), precision)


def _lookup(table: Mapping[str, M], family: str, name: Optional[str]) -> M:
    if not isinstance(name, str):
        raise UnknownUnitError(family, name)
    try:
        return table[name.strip()]
    except KeyError:
        raise UnknownUnitError(family, name) from None


def length_measure_by_name(name: Optional[str]) -> LengthMeasure:
    return _lookup(LENGTH_MEASURES, "length", name)


def area_measure_by_name(name: Optional[str]) -> AreaMeasure:
    return _lookup(AREA_MEASURES, "area", name)


def angle_measure_by_name(name: Optional[str]) -> AngleMeasure:
    return _lookup(ANGLE_MEASURES, "angle", name)


@dataclass(frozen=True)
class FigureMeasures:
    """Presentation units of a drawing; orthogonal to its stored geometry."""

    length: LengthMeasure = CENTIMETRE
    perimeter: LengthMeasure = METRE
    area: AreaMeasure = METRE2
    angle: AngleMeasure = DEGREE

    def __post_init__(self) -> None:
        expected = (
            ("length", LengthMeasure),
            ("perimeter", LengthMeasure),
            ("area", AreaMeasure),
            ("angle", AngleMeasure),
        )
        for attr, cls in expected:
            value = getattr(self, attr)
            if not isinstance(value, cls):
                raise MeasureFamilyError(f"{attr} measure must be a {cls.__name__}, got {value!r}")

    @classmethod
    def from_names(
        cls,
        names: Mapping[str, Optional[str]],
        previous: Optional["FigureMeasures"] = None,
    ) -> "FigureMeasures":
        """Resolve short unit names; omitted or empty names keep ``previous``.

        Unknown non-empty names raise :class:`UnknownUnitError` instead of
        silently falling back.
        """

        base = previous or cls()
        resolved: Dict[str, Measure] = {
            "length": base.length,
            "perimeter": base.perimeter,
            "area": base.area,
            "angle": base.angle,
        }
        lookups = {
            "length": length_measure_by_name,
            "perimeter": length_measure_by_name,
            "area": area_measure_by_name,
            "angle": angle_measure_by_name,
        }
        for key, lookup in lookups.items():
            name = names.get(key)
            if name is None or name == "":
                continue
            resolved[key] = lookup(name)
        return cls(**resolved)  # type: ignore[arg-type]

    def to_names(self) -> Dict[str, str]:
        return {
            "length": self.length.name,
            "perimeter": self.perimeter.name,
            "area": self.area.name,
            "angle": self.angle.name,
        }


__all__ = [
    "ANGLE_MEASURES",
    "AREA_MEASURES",
    "AngleMeasure",
    "AreaMeasure",
    "CENTIMETRE",
    "CENTIMETRE2",
    "DECIMETRE",
    "DECIMETRE2",
    "DEGREE",
    "FOOT",
    "FOOT2",
    "FigureMeasures",
    "INCH",
    "INCH2",
    "KILOMETRE",
    "KILOMETRE2",
    "LENGTH_MEASURES",
    "LengthMeasure",
    "METRE",
    "METRE2",
    "MILE",
    "MILE2",
    "MILLIMETRE",
    "MILLIMETRE2",
    "Measure",
    "RADIAN",
    "YARD",
    "YARD2",
    "angle_measure_by_name",
    "area_measure_by_name",
    "base_measure",
    "convert",
    "convert_from_base",
    "convert_from_base_round",
    "convert_round",
    "convert_to_base",
    "convert_to_base_round",
    "length_measure_by_name",
    "round_half_away",
]
