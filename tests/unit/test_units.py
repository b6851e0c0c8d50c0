from __future__ import annotations

import pytest

from papersize.catalog.units import UNIT_NAMES, factor_for, from_points, points_to_mm, to_points

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("unit", "expected"),
    [
        ("in", 1.0),
        ("ft", 12.0),
        ("pt", 1.0 / 72.0),
        ("m", 100.0 / 2.54),
        ("dm", 10.0 / 2.54),
        ("cm", 1.0 / 2.54),
        ("mm", 0.1 / 2.54),
    ],
)
def test_factor_for_known_units(unit: str, expected: float) -> None:
    assert factor_for(unit) == expected


@pytest.mark.parametrize("unit", ["IN", "Mm", "cM", "PT", "Ft"])
def test_factor_for_is_case_insensitive(unit: str) -> None:
    assert factor_for(unit) == factor_for(unit.lower())


@pytest.mark.parametrize("unit", ["", "inch", "px", "km", " mm", "mm ", "0"])
def test_factor_for_unknown_unit_is_none(unit: str) -> None:
    assert factor_for(unit) is None


def test_unit_names_cover_the_table() -> None:
    assert UNIT_NAMES == ("in", "ft", "pt", "m", "dm", "cm", "mm")


def test_to_points_converts_inches() -> None:
    assert to_points(8.5, "in") == 612.0
    assert to_points(1, "ft") == 864.0


def test_from_points_inverts_to_points() -> None:
    assert from_points(to_points(210, "mm"), "mm") == pytest.approx(210)
    assert from_points(612.0, "in") == 8.5


def test_conversion_rejects_unknown_unit() -> None:
    with pytest.raises(ValueError, match="unsupported unit 'px'"):
        to_points(1, "px")
    with pytest.raises(ValueError, match="unsupported unit 'px'"):
        from_points(1, "px")


@pytest.mark.parametrize(
    ("points", "expected"),
    [
        (595.2755905511812, 210),
        (841.8897637795276, 297),
        (612.0, 216),
        (792.0, 279),
        (0.0, 0),
    ],
)
def test_points_to_mm_rounds_to_nearest_millimetre(points: float, expected: int) -> None:
    assert points_to_mm(points) == expected
