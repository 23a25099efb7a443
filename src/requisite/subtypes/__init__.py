"""Semantic subtype registration and discovery utilities."""

from .registry import SubtypeManifest, SubtypeRegistry, build_default_registry

__all__ = [
    "SubtypeManifest",
    "SubtypeRegistry",
    "build_default_registry",
]
