"""Tagged value storage for requirement slots.

Fulfilled values are stored as a :class:`TypedValue`, a small variant that
pairs the Python value with its :class:`ValueKind`. Reads perform a checked
kind match instead of trusting the caller's expectation.

Notes
-----
numpy scalars are normalized to the matching Python scalar on entry, so a
``numpy.bool_`` fulfils a boolean slot and is returned as ``bool``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

from .errors import InvalidArgumentError, TypeMismatchError


class ValueKind(str, Enum):
    """Variant tag of a stored value."""

    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class TypedValue:
    """Value paired with its variant tag.

    Parameters
    ----------
    kind : ValueKind
        Variant tag of ``value``.
    value : Any
        Normalized Python value.
    """

    kind: ValueKind
    value: Any

    def matches(self, expected_type: type | ValueKind) -> bool:
        """Return whether the stored value satisfies ``expected_type``.

        Parameters
        ----------
        expected_type : type | ValueKind
            Python type (``bool``, ``int``, ``float``, ``str`` or a custom
            class) or a value kind.

        Returns
        -------
        bool
            ``True`` when kinds agree and, for custom values requested by
            class, the value is an instance of that class.
        """

        expected_kind = kind_for_type(expected_type)
        if expected_kind is not self.kind:
            return False
        if expected_kind is ValueKind.CUSTOM and isinstance(expected_type, type):
            return isinstance(self.value, expected_type)
        return True


def normalize_value(value: Any) -> Any:
    """Convert numpy scalars to their Python counterparts.

    Parameters
    ----------
    value : Any
        Raw value.

    Returns
    -------
    Any
        ``bool``/``int``/``float``/``str`` for numpy scalars of those
        families, otherwise ``value`` unchanged.
    """

    if isinstance(value, np.bool_):
        return bool(value)
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, np.floating):
        return float(value)
    if isinstance(value, np.str_):
        return str(value)
    return value


def infer_kind(value: Any) -> ValueKind:
    """Return the value kind of an already normalized value."""

    # bool is checked first: it is a subclass of int.
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    return ValueKind.CUSTOM


def kind_for_type(expected_type: type | ValueKind) -> ValueKind:
    """Map a Python type or a value kind to a value kind.

    Parameters
    ----------
    expected_type : type | ValueKind
        Requested type.

    Returns
    -------
    ValueKind
        Matching kind; any class outside the scalar families maps to
        :attr:`ValueKind.CUSTOM`.

    Raises
    ------
    InvalidArgumentError
        If ``expected_type`` is neither a class nor a value kind.
    """

    if isinstance(expected_type, ValueKind):
        return expected_type
    if not isinstance(expected_type, type):
        raise InvalidArgumentError(
            f"expected_type must be a type or ValueKind, got {expected_type!r}"
        )
    if issubclass(expected_type, (bool, np.bool_)):
        return ValueKind.BOOLEAN
    if issubclass(expected_type, (int, np.integer)):
        return ValueKind.INTEGER
    if issubclass(expected_type, (float, np.floating)):
        return ValueKind.FLOAT
    if issubclass(expected_type, str):
        return ValueKind.STRING
    return ValueKind.CUSTOM


def coerce_kind(raw: Any) -> ValueKind:
    """Parse a value kind from a :class:`ValueKind` or its string value.

    Raises
    ------
    InvalidArgumentError
        If ``raw`` names no known kind.
    """

    if isinstance(raw, ValueKind):
        return raw
    try:
        return ValueKind(str(raw).strip().lower())
    except ValueError as exc:
        allowed = sorted(item.value for item in ValueKind)
        raise InvalidArgumentError(f"unknown value kind {raw!r}; expected one of {allowed}") from exc


def coerce_value(
    value: Any,
    kind: ValueKind | None,
    *,
    custom_type: type | None = None,
    key: str | None = None,
) -> TypedValue:
    """Check ``value`` against a slot kind and wrap it.

    Parameters
    ----------
    value : Any
        Candidate value.
    kind : ValueKind | None
        Slot kind. ``None`` accepts any value and infers its kind.
    custom_type : type | None, optional
        Required class for :attr:`ValueKind.CUSTOM` slots.
    key : str | None, optional
        Requirement key used in error messages.

    Returns
    -------
    TypedValue
        Wrapped value. Integers fulfilling a float slot are stored as
        ``float``.

    Raises
    ------
    TypeMismatchError
        If the value's kind is incompatible with ``kind``.
    """

    normalized = normalize_value(value)
    actual = infer_kind(normalized)
    if kind is None or actual is kind:
        if kind is ValueKind.CUSTOM and custom_type is not None and not isinstance(normalized, custom_type):
            raise TypeMismatchError(
                f"{_label(key)} expects {custom_type.__name__}, got {type(normalized).__name__}",
                key=key,
            )
        return TypedValue(kind=actual, value=normalized)

    if kind is ValueKind.FLOAT and actual is ValueKind.INTEGER:
        return TypedValue(kind=ValueKind.FLOAT, value=float(normalized))

    raise TypeMismatchError(
        f"{_label(key)} expects a {kind.value} value, got {type(normalized).__name__} ({normalized!r})",
        key=key,
    )


def normalize_domain(
    domain: Iterable[Any] | None,
    kind: ValueKind | None,
    *,
    key: str | None = None,
) -> tuple[tuple[Any, ...] | None, ValueKind | None, type | None]:
    """Validate a domain declaration and derive the slot kind.

    Parameters
    ----------
    domain : Iterable[Any] | None
        Permitted values. numpy arrays are flattened.
    kind : ValueKind | None
        Explicitly declared kind, if any.
    key : str | None, optional
        Requirement key used in error messages.

    Returns
    -------
    tuple
        ``(members, kind, custom_type)``. ``members`` keeps declaration order
        with duplicates removed. ``custom_type`` is set only for custom
        domains.

    Raises
    ------
    InvalidArgumentError
        If the domain is empty, not iterable, a string, holds numpy arrays,
        mixes kinds, or disagrees with ``kind``.
    """

    if domain is None:
        return None, kind, None

    if isinstance(domain, np.ndarray):
        domain = domain.ravel().tolist()
    if isinstance(domain, (str, bytes)) or not isinstance(domain, Iterable):
        raise InvalidArgumentError(
            f"{_label(key)} domain must be a collection of values, got {type(domain).__name__}",
            key=key,
        )

    raw_members = [normalize_value(item) for item in domain]
    if not raw_members:
        raise InvalidArgumentError(f"{_label(key)} domain must contain at least one value", key=key)
    # Membership is tested with ==, which is elementwise for arrays.
    if any(isinstance(item, np.ndarray) for item in raw_members):
        raise InvalidArgumentError(f"{_label(key)} domain members must not be numpy arrays", key=key)

    if kind is None:
        kinds = {infer_kind(item) for item in raw_members}
        if kinds == {ValueKind.INTEGER, ValueKind.FLOAT}:
            kind = ValueKind.FLOAT
        elif len(kinds) == 1:
            kind = next(iter(kinds))
        else:
            names = sorted(item.value for item in kinds)
            raise InvalidArgumentError(f"{_label(key)} domain mixes value kinds {names}", key=key)

    custom_type: type | None = None
    if kind is ValueKind.CUSTOM:
        member_types = {type(item) for item in raw_members}
        if len(member_types) != 1:
            raise InvalidArgumentError(
                f"{_label(key)} custom domain members must share one type", key=key
            )
        custom_type = next(iter(member_types))

    members: list[Any] = []
    for item in raw_members:
        try:
            typed = coerce_value(item, kind, custom_type=custom_type, key=key)
        except TypeMismatchError as exc:
            raise InvalidArgumentError(
                f"{_label(key)} domain value {item!r} does not match kind {kind.value!r}", key=key
            ) from exc
        if not any(typed.value == existing for existing in members):
            members.append(typed.value)

    return tuple(members), kind, custom_type


def _label(key: str | None) -> str:
    """Return the message prefix for a requirement key."""

    return f"requirement {key!r}" if key is not None else "requirement"


__all__ = [
    "TypedValue",
    "ValueKind",
    "coerce_kind",
    "coerce_value",
    "infer_kind",
    "kind_for_type",
    "normalize_domain",
    "normalize_value",
]
