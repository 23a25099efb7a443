"""Load declaration and value files.

The loader supports JSON and YAML mappings with strict root-type validation.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from requisite.core.errors import InvalidArgumentError

SUPPORTED_CONFIG_SUFFIXES: tuple[str, ...] = (".json", ".yaml", ".yml")


def load_config_mapping(path: str | Path) -> dict[str, Any]:
    """Load one JSON/YAML file whose root is an object mapping.

    Parameters
    ----------
    path : str | pathlib.Path
        File path. Supported suffixes are `.json`, `.yaml`, and `.yml`.

    Returns
    -------
    dict[str, Any]
        Parsed mapping.

    Raises
    ------
    InvalidArgumentError
        If the suffix is unsupported, the content does not parse, or the root
        is not an object mapping.
    ImportError
        If YAML parsing is requested without PyYAML installed.
    """

    config_path = Path(path)
    suffix = config_path.suffix.lower()

    if suffix == ".json":
        with config_path.open("r", encoding="utf-8") as handle:
            try:
                raw = json.load(handle)
            except UnicodeDecodeError as exc:
                raise InvalidArgumentError(f"{config_path}: not valid UTF-8: {exc}") from exc
            except json.JSONDecodeError as exc:
                raise InvalidArgumentError(f"{config_path}: invalid JSON: {exc}") from exc
    elif suffix in {".yaml", ".yml"}:
        try:
            import yaml
        except ImportError as exc:  # pragma: no cover - exercised only without pyyaml
            raise ImportError(
                "YAML loading requires PyYAML. Install with `pip install requisite[yaml]`."
            ) from exc
        with config_path.open("r", encoding="utf-8") as handle:
            try:
                raw = yaml.safe_load(handle)
            except UnicodeDecodeError as exc:
                raise InvalidArgumentError(f"{config_path}: not valid UTF-8: {exc}") from exc
            except yaml.YAMLError as exc:
                raise InvalidArgumentError(f"{config_path}: invalid YAML: {exc}") from exc
    else:
        supported = ", ".join(SUPPORTED_CONFIG_SUFFIXES)
        raise InvalidArgumentError(
            f"unsupported config file extension {suffix!r}; expected one of {supported}"
        )

    if not isinstance(raw, dict):
        raise InvalidArgumentError(f"{config_path}: root must be a JSON/YAML object")
    return raw


__all__ = ["SUPPORTED_CONFIG_SUFFIXES", "load_config_mapping"]
