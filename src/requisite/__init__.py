"""Top-level package for ``requisite``.

The package separates declaring named parameters from supplying them:

1. a declarer builds a :class:`~requisite.core.requirements.Requirements`
   collection with :meth:`~requisite.core.requirements.Requirements.add`,
2. a fulfiller sets values with
   :meth:`~requisite.core.requirements.Requirements.fulfil`,
3. a reader checks
   :meth:`~requisite.core.requirements.Requirements.all_fulfilled` and reads
   values with :meth:`~requisite.core.requirements.Requirements.get_value`.

Notes
-----
Declarations can also be loaded from JSON/YAML files through
:mod:`requisite.config`.
"""

from .core import (
    DomainViolationError,
    DuplicateKeyError,
    InvalidArgumentError,
    NotFulfilledError,
    Requirement,
    Requirements,
    RequirementsError,
    SealedError,
    SubtypeViolationError,
    TypeMismatchError,
    TypedValue,
    UnknownKeyError,
    ValueKind,
)
from .reporting import FulfilmentReport, assert_fulfilled, check_fulfilment

__all__ = [
    "DomainViolationError",
    "DuplicateKeyError",
    "FulfilmentReport",
    "InvalidArgumentError",
    "NotFulfilledError",
    "Requirement",
    "Requirements",
    "RequirementsError",
    "SealedError",
    "SubtypeViolationError",
    "TypeMismatchError",
    "TypedValue",
    "UnknownKeyError",
    "ValueKind",
    "assert_fulfilled",
    "check_fulfilment",
]
