"""Tests for subtype manifests and discovery."""

from __future__ import annotations

import pytest

from requisite.core import InvalidArgumentError, UnknownKeyError
from requisite.subtypes import SubtypeManifest, SubtypeRegistry, build_default_registry
from requisite.subtypes.builtin import is_directory, is_email, is_filename, is_identifier, is_url


def test_default_registry_discovers_builtin_subtypes() -> None:
    """Default registry should include every built-in subtype."""

    registry = build_default_registry()

    subtypes = {manifest.subtype for manifest in registry.list()}
    assert {"filename", "directory", "email", "url", "identifier"} == subtypes
    assert "filename" in registry


def test_discovery_is_idempotent_for_same_package() -> None:
    """Repeated discovery should not create duplicate subtypes."""

    registry = SubtypeRegistry()
    registry.discover("requisite.subtypes")
    registry.discover("requisite.subtypes")

    subtypes = [manifest.subtype for manifest in registry.list()]
    assert len(subtypes) == len(set(subtypes))


def test_registry_rejects_conflicting_manifest() -> None:
    """A different manifest under an existing subtype should fail."""

    registry = build_default_registry()

    with pytest.raises(InvalidArgumentError, match="subtype conflict"):
        registry.register(SubtypeManifest(subtype="email", validator=lambda value: True))


def test_registry_lookup() -> None:
    """get() should raise for unknown subtypes; validator_for() should not."""

    registry = build_default_registry()

    assert registry.get("email").validator is is_email
    assert registry.validator_for("email") is is_email
    assert registry.validator_for("colour") is None
    assert registry.validator_for(None) is None
    with pytest.raises(UnknownKeyError):
        registry.get("colour")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("test.c", True),
        ("build/test.out", True),
        ("build/", False),
        ("..", False),
        ("", False),
        (3, False),
    ],
)
def test_is_filename(value: object, expected: bool) -> None:
    """Filename validation should reject directories and non-strings."""

    assert is_filename(value) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("dev@example.com", True),
        ("dev@example", False),
        ("not an email", False),
        (None, False),
    ],
)
def test_is_email(value: object, expected: bool) -> None:
    """Email validation should require one @ and a dotted domain."""

    assert is_email(value) is expected


def test_is_url_and_identifier() -> None:
    """URL and identifier checks should accept canonical forms."""

    assert is_url("https://example.com/path")
    assert is_url("file:///tmp/input.c")
    assert not is_url("example.com")
    assert is_identifier("input_file")
    assert not is_identifier("input-file")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("build", True),
        ("build/", True),
        ("   ", False),
        ("bad\x00dir", False),
        (None, False),
    ],
)
def test_is_directory(value: object, expected: bool) -> None:
    """Directory validation should accept non-blank strings without NUL."""

    assert is_directory(value) is expected
