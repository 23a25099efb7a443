"""Build requirement collections from declarative mappings.

A declaration mapping looks like::

    requirements:
      input_file: {subtype: filename}
      verbose: {domain: [true, false]}
      level: {kind: integer, domain: [0, 1, 2]}
    seal_on_fulfil: false

Entries may also be ``null`` to declare an unconstrained slot.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from requisite.core.errors import InvalidArgumentError
from requisite.core.requirement import Requirement
from requisite.core.requirements import Requirements
from requisite.subtypes import SubtypeRegistry, build_default_registry

from .loading import load_config_mapping

DECLARATION_KEYS: tuple[str, ...] = ("requirements", "seal_on_fulfil")
ENTRY_KEYS: tuple[str, ...] = ("domain", "kind", "subtype")


def requirements_from_config(
    config: Mapping[str, Any],
    *,
    registry: SubtypeRegistry | None = None,
) -> Requirements:
    """Build a requirement collection from a declaration mapping.

    Parameters
    ----------
    config : Mapping[str, Any]
        Declaration mapping with a ``requirements`` object.
    registry : SubtypeRegistry | None, optional
        Registry used to attach subtype validators. Defaults to the built-in
        registry. Unregistered subtypes carry no validator.

    Returns
    -------
    Requirements
        Unfulfilled collection in declaration order.

    Raises
    ------
    InvalidArgumentError
        If the mapping shape or any entry is invalid.
    """

    reg = registry if registry is not None else build_default_registry()
    config = _require_mapping(config, field_name="config")
    _check_keys(config, field_name="config", allowed=DECLARATION_KEYS, required=("requirements",))

    seal_on_fulfil = config.get("seal_on_fulfil", False)
    if not isinstance(seal_on_fulfil, bool):
        raise InvalidArgumentError("config.seal_on_fulfil must be a boolean")

    entries = _require_mapping(config["requirements"], field_name="config.requirements")
    requirements = Requirements(seal_on_fulfil=seal_on_fulfil)
    for key, raw_entry in entries.items():
        requirements.add_requirement(_parse_entry(str(key), raw_entry, registry=reg))
    return requirements


def fulfil_from_config(requirements: Requirements, values: Mapping[str, Any]) -> None:
    """Fulfil entries from a ``key -> value`` mapping.

    The batch is all-or-nothing: if any key is unknown or any value is
    rejected, no entry changes and the collection is not sealed.

    Raises
    ------
    UnknownKeyError
        If ``values`` names an undeclared key.
    """

    values = _require_mapping(values, field_name="values")
    requirements.fulfil_many({str(key): value for key, value in values.items()})


def requirements_to_config(requirements: Requirements) -> dict[str, Any]:
    """Return the declaration mapping describing ``requirements``.

    Validators are not serialized; they are reattached from the subtype
    registry when the mapping is loaded again.
    """

    entries: dict[str, Any] = {}
    for key in requirements.keys():
        requirement = requirements.get(key)
        entry: dict[str, Any] = {}
        if requirement.kind is not None:
            entry["kind"] = requirement.kind.value
        if requirement.domain is not None:
            entry["domain"] = list(requirement.domain)
        if requirement.subtype is not None:
            entry["subtype"] = requirement.subtype
        entries[key] = entry

    return {
        "requirements": entries,
        "seal_on_fulfil": requirements.seal_on_fulfil,
    }


def load_requirements(
    path: str | Path,
    *,
    registry: SubtypeRegistry | None = None,
) -> Requirements:
    """Load a declaration file (`.json`, `.yaml`, or `.yml`)."""

    return requirements_from_config(load_config_mapping(path), registry=registry)


def _parse_entry(key: str, raw_entry: Any, *, registry: SubtypeRegistry) -> Requirement:
    """Parse one declaration entry."""

    field_name = f"requirements.{key}"
    if raw_entry is None:
        return Requirement(key)

    entry = _require_mapping(raw_entry, field_name=field_name)
    _check_keys(entry, field_name=field_name, allowed=ENTRY_KEYS)

    domain = entry.get("domain")
    if domain is not None and not isinstance(domain, (list, tuple)):
        raise InvalidArgumentError(f"{field_name}.domain must be an array", key=key)

    subtype = entry.get("subtype")
    if subtype is not None and not isinstance(subtype, str):
        raise InvalidArgumentError(f"{field_name}.subtype must be a string", key=key)

    return Requirement(
        key,
        domain,
        subtype,
        kind=entry.get("kind"),
        validator=registry.validator_for(subtype),
    )


def _require_mapping(raw: Any, *, field_name: str) -> Mapping[str, Any]:
    """Return ``raw`` if it is a mapping, else raise."""

    if not isinstance(raw, Mapping):
        raise InvalidArgumentError(f"{field_name} must be an object")
    return raw


def _check_keys(
    mapping: Mapping[str, Any],
    *,
    field_name: str,
    allowed: tuple[str, ...],
    required: tuple[str, ...] = (),
) -> None:
    """Reject keys outside ``allowed`` and report missing ``required`` keys."""

    unknown = sorted(str(key) for key in mapping if str(key) not in allowed)
    if unknown:
        raise InvalidArgumentError(f"{field_name} has unknown keys: {unknown}")
    missing = [key for key in required if key not in mapping]
    if missing:
        raise InvalidArgumentError(f"{field_name} is missing required keys: {missing}")


__all__ = [
    "DECLARATION_KEYS",
    "ENTRY_KEYS",
    "fulfil_from_config",
    "load_requirements",
    "requirements_from_config",
    "requirements_to_config",
]
