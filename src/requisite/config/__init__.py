"""Declaration files and their conversion to requirement collections."""

from .declarations import (
    fulfil_from_config,
    load_requirements,
    requirements_from_config,
    requirements_to_config,
)
from .loading import SUPPORTED_CONFIG_SUFFIXES, load_config_mapping

__all__ = [
    "SUPPORTED_CONFIG_SUFFIXES",
    "fulfil_from_config",
    "load_config_mapping",
    "load_requirements",
    "requirements_from_config",
    "requirements_to_config",
]
