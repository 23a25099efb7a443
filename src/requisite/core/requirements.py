"""Keyed collection of requirement slots.

A declarer builds a :class:`Requirements` collection, a fulfiller sets
values by key, and a reader checks :meth:`Requirements.all_fulfilled` before
retrieving typed values. The three roles may be one component or several.

Notes
-----
The collection is not thread-safe. Callers sharing one instance across
threads must guard the whole instance.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
import logging
from typing import Any

from .errors import DuplicateKeyError, InvalidArgumentError, SealedError, UnknownKeyError
from .requirement import Requirement, Validator
from .values import ValueKind

logger = logging.getLogger(__name__)


class Requirements:
    """Insertion-ordered collection of :class:`Requirement` entries.

    Parameters
    ----------
    requirements : Iterable[Requirement], optional
        Pre-built entries inserted in order.
    seal_on_fulfil : bool, optional
        When ``True`` the collection seals itself on the first successful
        :meth:`fulfil`, so no entries can be added or removed afterwards.

    Raises
    ------
    DuplicateKeyError
        If ``requirements`` repeats a key.
    """

    def __init__(self, requirements: Iterable[Requirement] = (), *, seal_on_fulfil: bool = False) -> None:
        self._entries: dict[str, Requirement] = {}
        self._sealed = False
        self._seal_on_fulfil = bool(seal_on_fulfil)
        for requirement in requirements:
            self.add_requirement(requirement)

    @property
    def sealed(self) -> bool:
        """Whether entries can no longer be added or removed."""

        return self._sealed

    @property
    def seal_on_fulfil(self) -> bool:
        """Whether the first successful fulfil seals the collection."""

        return self._seal_on_fulfil

    def seal(self) -> None:
        """Disallow further :meth:`add` and :meth:`remove` calls."""

        if not self._sealed:
            logger.debug("sealing requirements with %d entries", len(self._entries))
        self._sealed = True

    def add(
        self,
        key: str,
        domain: Iterable[Any] | None = None,
        subtype: str | None = None,
        *,
        kind: ValueKind | str | None = None,
        validator: Validator | None = None,
    ) -> Requirement:
        """Declare a new unfulfilled entry.

        Parameters
        ----------
        key : str
            Entry key.
        domain : Iterable[Any] | None, optional
            Permitted values.
        subtype : str | None, optional
            Semantic tag.
        kind : ValueKind | str | None, optional
            Explicit value kind.
        validator : Callable[[Any], bool] | None, optional
            Extra acceptance check.

        Returns
        -------
        Requirement
            Inserted entry.

        Raises
        ------
        DuplicateKeyError
            If ``key`` is already declared.
        SealedError
            If the collection is sealed.
        InvalidArgumentError
            If the entry itself is invalid.
        """

        return self.add_requirement(
            Requirement(key, domain, subtype, kind=kind, validator=validator)
        )

    def add_requirement(self, requirement: Requirement) -> Requirement:
        """Insert a pre-built entry under its own key."""

        if not isinstance(requirement, Requirement):
            raise InvalidArgumentError(
                f"expected a Requirement, got {type(requirement).__name__}"
            )
        self._check_insertable(requirement.key)
        self._entries[requirement.key] = requirement
        logger.debug("declared requirement %r", requirement.key)
        return requirement

    def get(self, key: str) -> Requirement:
        """Return the entry stored under ``key``.

        Raises
        ------
        UnknownKeyError
            If ``key`` is not declared.
        """

        try:
            return self._entries[key]
        except KeyError:
            raise UnknownKeyError(f"unknown requirement key {key!r}", key=key) from None

    def fulfil(self, key: str, value: Any) -> None:
        """Fulfil the entry stored under ``key``.

        Errors raised by :meth:`Requirement.fulfil` propagate unchanged.

        Raises
        ------
        UnknownKeyError
            If ``key`` is not declared.
        """

        self.get(key).fulfil(value)
        logger.debug("fulfilled requirement %r", key)
        if self._seal_on_fulfil:
            self.seal()

    def fulfil_many(self, values: Mapping[str, Any]) -> None:
        """Fulfil several entries as one all-or-nothing batch.

        Every key is resolved and every value checked before the first write,
        so a failing batch leaves all entries and the sealed state unchanged.

        Parameters
        ----------
        values : Mapping[str, Any]
            ``key -> value`` pairs.

        Raises
        ------
        UnknownKeyError
            If ``values`` names an undeclared key.
        TypeMismatchError, DomainViolationError
            If any value is rejected by its entry.
        """

        checked = []
        for key, value in values.items():
            requirement = self.get(key)
            checked.append((requirement, requirement.check(value), requirement.value))

        written = []
        try:
            for requirement, typed, previous in checked:
                requirement.fulfil(typed.value)
                written.append((requirement, previous))
        except Exception:
            # A validator changed its verdict between the two passes.
            for requirement, previous in reversed(written):
                if previous is None:
                    requirement.clear()
                else:
                    requirement.fulfil(previous.value)
            raise

        for requirement, _ in written:
            logger.debug("fulfilled requirement %r", requirement.key)
        if written and self._seal_on_fulfil:
            self.seal()

    def get_value(self, key: str, expected_type: type | ValueKind) -> Any:
        """Return the value of ``key`` checked against ``expected_type``.

        Raises
        ------
        UnknownKeyError
            If ``key`` is not declared.
        NotFulfilledError
            If the entry holds no value.
        TypeMismatchError
            If the held value does not match ``expected_type``.
        """

        return self.get(key).get_value(expected_type)

    def is_fulfilled(self, key: str) -> bool:
        """Return whether the entry stored under ``key`` holds a value."""

        return self.get(key).is_fulfilled()

    def all_fulfilled(self) -> bool:
        """Return whether every entry is fulfilled. Empty collections are."""

        return all(requirement.is_fulfilled() for requirement in self._entries.values())

    def unfulfilled_keys(self) -> tuple[str, ...]:
        """Return keys without a value, in insertion order."""

        return tuple(key for key, requirement in self._entries.items() if not requirement.is_fulfilled())

    def clear(self, key: str) -> None:
        """Reset the entry stored under ``key`` to unfulfilled."""

        self.get(key).clear()
        logger.debug("cleared requirement %r", key)

    def remove(self, key: str) -> None:
        """Delete the entry stored under ``key``, fulfilled or not.

        Raises
        ------
        UnknownKeyError
            If ``key`` is not declared.
        SealedError
            If the collection is sealed.
        """

        self.get(key)
        if self._sealed:
            raise SealedError(f"cannot remove {key!r}: requirements are sealed", key=key)
        del self._entries[key]
        logger.debug("removed requirement %r", key)

    def keys(self) -> tuple[str, ...]:
        """Return a snapshot of declared keys in insertion order."""

        return tuple(self._entries)

    def values(self) -> dict[str, Any]:
        """Return raw values of fulfilled entries keyed in insertion order."""

        return {
            key: requirement.value.value
            for key, requirement in self._entries.items()
            if requirement.value is not None
        }

    def _check_insertable(self, key: str) -> None:
        """Raise if ``key`` cannot be inserted now."""

        if self._sealed:
            raise SealedError(f"cannot add {key!r}: requirements are sealed", key=key)
        if key in self._entries:
            raise DuplicateKeyError(f"requirement key {key!r} is already declared", key=key)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __repr__(self) -> str:
        fulfilled = len(self._entries) - len(self.unfulfilled_keys())
        return f"Requirements(keys={list(self._entries)!r}, fulfilled={fulfilled}/{len(self._entries)})"


__all__ = ["Requirements"]
