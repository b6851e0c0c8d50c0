from __future__ import annotations

from typing import Final

from papersize.constants import POINTS_PER_INCH

# Inches per unit.
UNIT_FACTORS: Final[tuple[tuple[str, float], ...]] = (
    ("in", 1.0),
    ("ft", 12.0),
    ("pt", 1.0 / 72.0),
    ("m", 100.0 / 2.54),
    ("dm", 10.0 / 2.54),
    ("cm", 1.0 / 2.54),
    ("mm", 0.1 / 2.54),
)
UNIT_NAMES: Final[tuple[str, ...]] = tuple(name for name, _ in UNIT_FACTORS)
_FACTORS_BY_NAME: Final[dict[str, float]] = dict(UNIT_FACTORS)


def factor_for(unit_name: str) -> float | None:
    return _FACTORS_BY_NAME.get(unit_name.lower())


def to_points(value: float, unit_name: str) -> float:
    factor = factor_for(unit_name)
    if factor is None:
        valid = ", ".join(UNIT_NAMES)
        raise ValueError(f"unsupported unit '{unit_name}', expected one of: {valid}")
    return value * (factor * POINTS_PER_INCH)


def from_points(points: float, unit_name: str) -> float:
    factor = factor_for(unit_name)
    if factor is None:
        valid = ", ".join(UNIT_NAMES)
        raise ValueError(f"unsupported unit '{unit_name}', expected one of: {valid}")
    return points / POINTS_PER_INCH / factor


def points_to_mm(points: float) -> int:
    # Half-up rounding, not round()'s banker's rounding.
    return int(points * 2.54 * 10 / 72 + 0.5)
