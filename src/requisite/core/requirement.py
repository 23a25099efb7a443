"""Single named requirement slot.

A :class:`Requirement` is declared unfulfilled and later receives a value.
It enforces its own constraints at fulfil time:

1. the value kind must match the slot kind (``TypeMismatchError``),
2. the value must be a domain member when a domain is declared
   (``DomainViolationError``),
3. an attached validator must accept the value (``SubtypeViolationError``).

The checks run in this order and a failed fulfil keeps the previous value.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from .errors import (
    DomainViolationError,
    InvalidArgumentError,
    NotFulfilledError,
    SubtypeViolationError,
    TypeMismatchError,
)
from .values import TypedValue, ValueKind, coerce_kind, coerce_value, normalize_domain

Validator = Callable[[Any], bool]


class Requirement:
    """Named parameter slot with optional domain, kind and subtype.

    Parameters
    ----------
    key : str
        Non-empty identifier. Immutable.
    domain : Iterable[Any] | None, optional
        Permitted values. When given, it must be non-empty and its members
        must share one value kind, which becomes the slot kind.
    subtype : str | None, optional
        Semantic tag such as ``"filename"`` or ``"email"``.
    kind : ValueKind | str | None, optional
        Explicit slot kind. Must agree with ``domain`` when both are given.
    validator : Callable[[Any], bool] | None, optional
        Extra acceptance check run after the kind and domain checks.

    Raises
    ------
    InvalidArgumentError
        If ``key`` is empty, the domain is empty or inconsistent, or
        ``validator`` is not callable.
    """

    __slots__ = ("_key", "_domain", "_kind", "_custom_type", "_subtype", "_validator", "_value")

    def __init__(
        self,
        key: str,
        domain: Iterable[Any] | None = None,
        subtype: str | None = None,
        *,
        kind: ValueKind | str | None = None,
        validator: Validator | None = None,
    ) -> None:
        if not isinstance(key, str) or not key:
            raise InvalidArgumentError(f"requirement key must be a non-empty string, got {key!r}")
        if subtype is not None and (not isinstance(subtype, str) or not subtype):
            raise InvalidArgumentError(f"requirement {key!r} subtype must be a non-empty string", key=key)
        if validator is not None and not callable(validator):
            raise InvalidArgumentError(f"requirement {key!r} validator must be callable", key=key)

        declared_kind = coerce_kind(kind) if kind is not None else None
        members, slot_kind, custom_type = normalize_domain(domain, declared_kind, key=key)

        self._key = key
        self._domain = members
        self._kind = slot_kind
        self._custom_type = custom_type
        self._subtype = subtype
        self._validator = validator
        self._value: TypedValue | None = None

    @property
    def key(self) -> str:
        """Immutable slot identifier."""

        return self._key

    @property
    def domain(self) -> tuple[Any, ...] | None:
        """Permitted values in declaration order, or ``None`` if open."""

        return self._domain

    @property
    def kind(self) -> ValueKind | None:
        """Declared or inferred slot kind, or ``None`` if unconstrained."""

        return self._kind

    @property
    def subtype(self) -> str | None:
        """Semantic tag, or ``None``."""

        return self._subtype

    @property
    def validator(self) -> Validator | None:
        """Attached acceptance check, or ``None``."""

        return self._validator

    @property
    def value(self) -> TypedValue | None:
        """Held typed value, or ``None`` while unfulfilled."""

        return self._value

    def check(self, value: Any) -> TypedValue:
        """Validate ``value`` for this slot without storing it.

        Parameters
        ----------
        value : Any
            Candidate value.

        Returns
        -------
        TypedValue
            Value as :meth:`fulfil` would store it.

        Raises
        ------
        TypeMismatchError
            If the value kind is incompatible with the slot kind.
        DomainViolationError
            If a domain is declared and ``value`` is not a member.
        SubtypeViolationError
            If the attached validator rejects ``value``.
        """

        typed = coerce_value(value, self._kind, custom_type=self._custom_type, key=self._key)

        if self._domain is not None and not any(typed.value == member for member in self._domain):
            raise DomainViolationError(
                f"requirement {self._key!r} value {typed.value!r} is not in domain {list(self._domain)!r}",
                key=self._key,
            )

        if self._validator is not None and not self._validator(typed.value):
            label = f"subtype {self._subtype!r}" if self._subtype is not None else "validator"
            raise SubtypeViolationError(
                f"requirement {self._key!r} value {typed.value!r} rejected by {label}",
                key=self._key,
            )

        return typed

    def fulfil(self, value: Any) -> None:
        """Set the slot value, replacing any previous one.

        The checks of :meth:`check` run first; on failure the previous value
        is kept.
        """

        self._value = self.check(value)

    def is_fulfilled(self) -> bool:
        """Return whether a value is held."""

        return self._value is not None

    def get_value(self, expected_type: type | ValueKind) -> Any:
        """Return the held value checked against ``expected_type``.

        Parameters
        ----------
        expected_type : type | ValueKind
            Type the caller expects, e.g. ``bool`` or ``str``.

        Returns
        -------
        Any
            Held value.

        Raises
        ------
        NotFulfilledError
            If no value is held.
        TypeMismatchError
            If the held value does not match ``expected_type``.
        """

        if self._value is None:
            raise NotFulfilledError(f"requirement {self._key!r} is not fulfilled", key=self._key)
        if not self._value.matches(expected_type):
            expected = expected_type.value if isinstance(expected_type, ValueKind) else expected_type.__name__
            raise TypeMismatchError(
                f"requirement {self._key!r} holds a {self._value.kind.value} value, not {expected}",
                key=self._key,
            )
        return self._value.value

    def clear(self) -> None:
        """Reset to unfulfilled. Key, domain, kind and subtype are kept."""

        self._value = None

    def __repr__(self) -> str:
        parts = [f"key={self._key!r}"]
        if self._kind is not None:
            parts.append(f"kind={self._kind.value!r}")
        if self._domain is not None:
            parts.append(f"domain={list(self._domain)!r}")
        if self._subtype is not None:
            parts.append(f"subtype={self._subtype!r}")
        parts.append(f"fulfilled={self.is_fulfilled()}")
        return f"Requirement({', '.join(parts)})"


__all__ = ["Requirement", "Validator"]
