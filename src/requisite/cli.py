"""CLI for checking a values file against a declaration file."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence

from requisite.config import fulfil_from_config, load_config_mapping, load_requirements
from requisite.core.errors import RequirementsError
from requisite.core.requirements import Requirements
from requisite.reporting import FulfilmentReport, check_fulfilment

logger = logging.getLogger(__name__)

EXIT_COMPLETE = 0
EXIT_INCOMPLETE = 1
EXIT_INVALID = 2


def run_check_cli(argv: Sequence[str] | None = None) -> int:
    """Run the declaration check flow.

    Parameters
    ----------
    argv : Sequence[str] | None, optional
        CLI argument list. When ``None``, process arguments are used.

    Returns
    -------
    int
        Exit code (`0` when all requirements are fulfilled, `1` when some are
        missing, `2` when the declaration or values are invalid).
    """

    parser = argparse.ArgumentParser(description="Check values against a requirements declaration.")
    parser.add_argument("--declaration", required=True, help="Path to declaration JSON or YAML file.")
    parser.add_argument("--values", default=None, help="Path to values JSON or YAML file.")
    parser.add_argument("--json", action="store_true", help="Print a JSON summary instead of a table.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        requirements = load_requirements(args.declaration)
        if args.values is not None:
            fulfil_from_config(requirements, load_config_mapping(args.values))
    except (RequirementsError, OSError, ImportError) as exc:
        logger.debug("check failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID

    report = check_fulfilment(requirements)
    if args.json:
        print(json.dumps(_summary(requirements, report), indent=2, sort_keys=True, default=repr))
    else:
        for line in _table_lines(requirements):
            print(line)
        print(f"Fulfilled: {len(report.fulfilled)}/{len(requirements)}")

    return EXIT_COMPLETE if report.is_complete else EXIT_INCOMPLETE


def _summary(requirements: Requirements, report: FulfilmentReport) -> dict[str, Any]:
    """Build a JSON-serializable summary of the checked collection."""

    entries: dict[str, Any] = {}
    for key in requirements.keys():
        requirement = requirements.get(key)
        entries[key] = {
            "kind": requirement.kind.value if requirement.kind is not None else None,
            "subtype": requirement.subtype,
            "fulfilled": requirement.is_fulfilled(),
            "value": requirement.value.value if requirement.value is not None else None,
        }
    return {
        "is_complete": report.is_complete,
        "missing": list(report.missing),
        "requirements": entries,
    }


def _table_lines(requirements: Requirements) -> list[str]:
    """Format one status line per entry."""

    keys = requirements.keys()
    width = max((len(key) for key in keys), default=0)
    lines = []
    for key in keys:
        requirement = requirements.get(key)
        status = "ok" if requirement.is_fulfilled() else "missing"
        detail = repr(requirement.value.value) if requirement.value is not None else "-"
        lines.append(f"{key.ljust(width)}  {status:<7}  {detail}")
    return lines


def main() -> None:
    """Execute the check CLI and exit with the returned code."""

    raise SystemExit(run_check_cli())


if __name__ == "__main__":
    main()


__all__ = ["main", "run_check_cli"]
