"""Exception hierarchy for requirement declaration and fulfilment.

Every error derives from :class:`RequirementsError` and from the builtin
exception closest to its meaning, so callers may catch either the library
type or the familiar builtin.
"""

from __future__ import annotations


class RequirementsError(Exception):
    """Base class for all requirement errors.

    Parameters
    ----------
    message : str
        Human-readable description.
    key : str | None, optional
        Requirement key involved in the failure, if any.
    """

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.key = key

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(RequirementsError, ValueError):
    """Raised when a requirement or declaration is constructed from bad input."""


class DuplicateKeyError(RequirementsError, ValueError):
    """Raised when a key is added to a collection that already holds it."""


class UnknownKeyError(RequirementsError, KeyError):
    """Raised when an operation references a key the collection does not hold."""


class DomainViolationError(RequirementsError, ValueError):
    """Raised when a fulfilling value is not a member of the declared domain."""


class SubtypeViolationError(DomainViolationError):
    """Raised when an attached subtype validator rejects a fulfilling value."""


class TypeMismatchError(RequirementsError, TypeError):
    """Raised when a value's kind is incompatible with the slot or request."""


class NotFulfilledError(RequirementsError, LookupError):
    """Raised when a value is read from a requirement that holds none."""


class SealedError(RequirementsError, RuntimeError):
    """Raised when entries are added to or removed from a sealed collection."""


__all__ = [
    "DomainViolationError",
    "DuplicateKeyError",
    "InvalidArgumentError",
    "NotFulfilledError",
    "RequirementsError",
    "SealedError",
    "SubtypeViolationError",
    "TypeMismatchError",
    "UnknownKeyError",
]
