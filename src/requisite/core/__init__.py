"""Core requirement slots, collection, typed values and errors."""

from .errors import (
    DomainViolationError,
    DuplicateKeyError,
    InvalidArgumentError,
    NotFulfilledError,
    RequirementsError,
    SealedError,
    SubtypeViolationError,
    TypeMismatchError,
    UnknownKeyError,
)
from .requirement import Requirement, Validator
from .requirements import Requirements
from .values import TypedValue, ValueKind, coerce_kind, coerce_value, infer_kind, kind_for_type

__all__ = [
    "DomainViolationError",
    "DuplicateKeyError",
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
    "Validator",
    "ValueKind",
    "coerce_kind",
    "coerce_value",
    "infer_kind",
    "kind_for_type",
]
