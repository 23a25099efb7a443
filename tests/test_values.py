"""Tests for typed value helpers."""

from __future__ import annotations

import numpy as np
import pytest

from requisite.core import InvalidArgumentError, TypedValue, TypeMismatchError, ValueKind
from requisite.core.values import coerce_kind, coerce_value, infer_kind, kind_for_type, normalize_value


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, ValueKind.BOOLEAN),
        (0, ValueKind.INTEGER),
        (0.5, ValueKind.FLOAT),
        ("x", ValueKind.STRING),
        (None, ValueKind.CUSTOM),
        ([1, 2], ValueKind.CUSTOM),
    ],
)
def test_infer_kind(value: object, expected: ValueKind) -> None:
    """Python scalars should map to their variant tags."""

    assert infer_kind(value) is expected


def test_normalize_value_converts_numpy_scalars() -> None:
    """numpy scalar families should become Python scalars."""

    assert type(normalize_value(np.bool_(False))) is bool
    assert type(normalize_value(np.int32(4))) is int
    assert type(normalize_value(np.float32(0.25))) is float
    assert type(normalize_value(np.str_("a"))) is str


@pytest.mark.parametrize(
    ("expected_type", "kind"),
    [
        (bool, ValueKind.BOOLEAN),
        (int, ValueKind.INTEGER),
        (float, ValueKind.FLOAT),
        (str, ValueKind.STRING),
        (np.bool_, ValueKind.BOOLEAN),
        (np.int64, ValueKind.INTEGER),
        (np.float64, ValueKind.FLOAT),
        (dict, ValueKind.CUSTOM),
        (ValueKind.STRING, ValueKind.STRING),
    ],
)
def test_kind_for_type(expected_type: object, kind: ValueKind) -> None:
    """Requested types should resolve to variant tags."""

    assert kind_for_type(expected_type) is kind  # type: ignore[arg-type]


def test_kind_for_type_rejects_instances() -> None:
    """Only classes and kinds are valid expectations."""

    with pytest.raises(InvalidArgumentError):
        kind_for_type("str")  # type: ignore[arg-type]


def test_coerce_kind_parses_strings() -> None:
    """Kind names should parse case-insensitively."""

    assert coerce_kind("Boolean") is ValueKind.BOOLEAN
    assert coerce_kind(ValueKind.FLOAT) is ValueKind.FLOAT
    with pytest.raises(InvalidArgumentError, match="unknown value kind"):
        coerce_kind("decimal")


def test_coerce_value_widens_int_to_float() -> None:
    """Integer values should widen for float slots."""

    assert coerce_value(2, ValueKind.FLOAT) == TypedValue(kind=ValueKind.FLOAT, value=2.0)


def test_coerce_value_rejects_bool_for_float() -> None:
    """Booleans should not widen to float."""

    with pytest.raises(TypeMismatchError, match="requirement 'ratio' expects a float value"):
        coerce_value(True, ValueKind.FLOAT, key="ratio")


def test_typed_value_matches() -> None:
    """Checked matches should respect bool/int separation."""

    typed = TypedValue(kind=ValueKind.BOOLEAN, value=True)

    assert typed.matches(bool)
    assert not typed.matches(int)
    assert not typed.matches(object)
