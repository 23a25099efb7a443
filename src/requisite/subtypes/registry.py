"""Subtype manifests and auto-discovery registry.

Subtypes are plain tag strings on a requirement. This registry maps a tag to
an optional validator hook so declarations can attach the check when they
build entries. Discovery scans a package for ``SUBTYPE_MANIFESTS`` constants.
"""

from __future__ import annotations

from dataclasses import dataclass
import importlib
import pkgutil

from requisite.core.errors import InvalidArgumentError, UnknownKeyError
from requisite.core.requirement import Validator


@dataclass(frozen=True, slots=True)
class SubtypeManifest:
    """Manifest for one semantic subtype.

    Parameters
    ----------
    subtype : str
        Tag string, unique within a registry.
    validator : Callable[[Any], bool]
        Returns ``True`` when a value is acceptable for the subtype.
    description : str, optional
        Human-readable summary.
    """

    subtype: str
    validator: Validator
    description: str = ""


class SubtypeRegistry:
    """Registry of subtype manifests with package auto-discovery."""

    def __init__(self) -> None:
        self._manifests: dict[str, SubtypeManifest] = {}

    def register(self, manifest: SubtypeManifest) -> None:
        """Register one subtype manifest.

        Raises
        ------
        InvalidArgumentError
            If a different manifest already exists for the same subtype.
        """

        existing = self._manifests.get(manifest.subtype)
        if existing is None:
            self._manifests[manifest.subtype] = manifest
            return

        if existing != manifest:
            raise InvalidArgumentError(f"subtype conflict for {manifest.subtype!r}; already registered")

    def get(self, subtype: str) -> SubtypeManifest:
        """Return a manifest by subtype.

        Raises
        ------
        UnknownKeyError
            If the subtype is not registered.
        """

        try:
            return self._manifests[subtype]
        except KeyError:
            raise UnknownKeyError(f"unknown subtype {subtype!r}", key=subtype) from None

    def validator_for(self, subtype: str | None) -> Validator | None:
        """Return the validator for ``subtype`` or ``None`` when unregistered."""

        if subtype is None:
            return None
        manifest = self._manifests.get(subtype)
        return manifest.validator if manifest is not None else None

    def list(self) -> tuple[SubtypeManifest, ...]:
        """List registered manifests sorted by subtype."""

        return tuple(sorted(self._manifests.values(), key=lambda item: item.subtype))

    def __contains__(self, subtype: object) -> bool:
        return subtype in self._manifests

    def discover(self, package_name: str) -> tuple[SubtypeManifest, ...]:
        """Discover and register manifests in a package tree.

        Parameters
        ----------
        package_name : str
            Package root to scan. Every module may define
            ``SUBTYPE_MANIFESTS``.

        Returns
        -------
        tuple[SubtypeManifest, ...]
            Manifests discovered in the package.
        """

        discovered: list[SubtypeManifest] = []
        package = importlib.import_module(package_name)

        modules = [package]
        if hasattr(package, "__path__"):
            for module_info in pkgutil.walk_packages(package.__path__, prefix=package.__name__ + "."):
                modules.append(importlib.import_module(module_info.name))

        for module in modules:
            for manifest in getattr(module, "SUBTYPE_MANIFESTS", ()):
                if not isinstance(manifest, SubtypeManifest):
                    raise TypeError(f"{module.__name__}.SUBTYPE_MANIFESTS must contain SubtypeManifest objects")
                self.register(manifest)
                discovered.append(manifest)

        return tuple(discovered)


def build_default_registry() -> SubtypeRegistry:
    """Build a registry with the built-in subtypes discovered."""

    registry = SubtypeRegistry()
    registry.discover("requisite.subtypes")
    return registry
