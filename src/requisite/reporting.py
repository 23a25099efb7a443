"""Readiness reports for requirement collections."""

from __future__ import annotations

from dataclasses import dataclass

from requisite.core.errors import NotFulfilledError
from requisite.core.requirements import Requirements


@dataclass(frozen=True, slots=True)
class FulfilmentReport:
    """Fulfilment check result.

    Parameters
    ----------
    is_complete : bool
        ``True`` when every declared entry holds a value.
    missing : tuple[str, ...]
        Unfulfilled keys in declaration order.
    fulfilled : tuple[str, ...]
        Fulfilled keys in declaration order.
    """

    is_complete: bool
    missing: tuple[str, ...]
    fulfilled: tuple[str, ...]


def check_fulfilment(requirements: Requirements) -> FulfilmentReport:
    """Summarize which entries of ``requirements`` are fulfilled.

    Parameters
    ----------
    requirements : Requirements
        Collection to inspect.

    Returns
    -------
    FulfilmentReport
        Completion flag and per-key partition.
    """

    missing = requirements.unfulfilled_keys()
    fulfilled = tuple(key for key in requirements.keys() if key not in missing)
    return FulfilmentReport(is_complete=len(missing) == 0, missing=missing, fulfilled=fulfilled)


def assert_fulfilled(requirements: Requirements) -> None:
    """Raise ``NotFulfilledError`` listing every unfulfilled key."""

    report = check_fulfilment(requirements)
    if report.is_complete:
        return

    formatted = "\n".join(f"- {key}" for key in report.missing)
    raise NotFulfilledError(
        f"requirements are not fulfilled:\n{formatted}",
        key=report.missing[0],
    )


__all__ = ["FulfilmentReport", "assert_fulfilled", "check_fulfilment"]
