from __future__ import annotations

import math

import pytest

from selprops.domain.commit import InvalidValueError, ValueKind, coerce_value
from selprops.domain.model import StrokeAlignment, TextAlign


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (3, 3.0),
        (2.5, 2.5),
        ("12", 12.0),
        ("  -4.25\t", -4.25),
    ],
)
def test_numbers_accept_numeric_input(raw: object, expected: float) -> None:
    assert coerce_value(ValueKind.NUMBER, raw) == expected


@pytest.mark.parametrize("raw", ["twelve", "", "nan", "-inf", math.inf, math.nan, None, [1.0]])
def test_numbers_reject_non_finite_or_unparseable_input(raw: object) -> None:
    with pytest.raises(InvalidValueError):
        coerce_value(ValueKind.NUMBER, raw)


def test_angles_are_entered_in_degrees() -> None:
    assert coerce_value(ValueKind.ANGLE, "45") == pytest.approx(math.pi / 4)
    assert coerce_value(ValueKind.ANGLE, -180) == pytest.approx(-math.pi)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(True, True), (False, False), ("true", True), (" no ", False), (1, True), (0, False)],
)
def test_booleans_accept_common_spellings(raw: object, expected: bool) -> None:
    assert coerce_value(ValueKind.BOOLEAN, raw) is expected


def test_boolean_rejects_other_values() -> None:
    with pytest.raises(InvalidValueError):
        coerce_value(ValueKind.BOOLEAN, "sometimes")


def test_strings_are_strict() -> None:
    assert coerce_value(ValueKind.STRING, "Inter") == "Inter"
    with pytest.raises(InvalidValueError):
        coerce_value(ValueKind.STRING, 12)


def test_enums_accept_their_values() -> None:
    assert coerce_value(ValueKind.ENUM, "center", enum_type=TextAlign) is TextAlign.CENTER
    assert (
        coerce_value(ValueKind.ENUM, StrokeAlignment.OUTSIDE, enum_type=StrokeAlignment)
        is StrokeAlignment.OUTSIDE
    )


def test_enums_reject_unknown_members() -> None:
    with pytest.raises(InvalidValueError, match="cannot read 'diagonal'"):
        coerce_value(ValueKind.ENUM, "diagonal", enum_type=TextAlign)


def test_enum_kind_requires_enum_type() -> None:
    with pytest.raises(InvalidValueError, match="enum type"):
        coerce_value(ValueKind.ENUM, "center")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("-5", 0.0), (0.25, 0.25), (7, 1.0)],
)
def test_numbers_are_clamped_into_bounds(raw: object, expected: float) -> None:
    assert coerce_value(ValueKind.NUMBER, raw, minimum=0.0, maximum=1.0) == expected


def test_unbounded_numbers_pass_through() -> None:
    assert coerce_value(ValueKind.NUMBER, "-5") == -5.0
