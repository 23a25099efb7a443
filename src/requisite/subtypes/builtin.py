"""Built-in semantic subtypes for string requirements."""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import urlparse

from .registry import SubtypeManifest

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_URL_SCHEMES = frozenset({"http", "https", "ftp", "file"})


def is_filename(value: Any) -> bool:
    """Return whether ``value`` names a file path (not a directory path)."""

    if not isinstance(value, str) or not value.strip() or "\x00" in value:
        return False
    if value.endswith(("/", "\\")):
        return False
    basename = re.split(r"[/\\]", value)[-1]
    return basename not in {".", ".."}


def is_directory(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip()) and "\x00" not in value


def is_email(value: Any) -> bool:
    return isinstance(value, str) and _EMAIL_PATTERN.match(value) is not None


def is_url(value: Any) -> bool:
    """Return whether ``value`` is an absolute URL with a supported scheme."""

    if not isinstance(value, str):
        return False
    parsed = urlparse(value)
    if parsed.scheme not in _URL_SCHEMES:
        return False
    # file URLs may omit the host.
    return bool(parsed.netloc) or (parsed.scheme == "file" and bool(parsed.path))


def is_identifier(value: Any) -> bool:
    return isinstance(value, str) and value.isidentifier()


SUBTYPE_MANIFESTS = [
    SubtypeManifest(subtype="filename", validator=is_filename, description="Path to a file"),
    SubtypeManifest(subtype="directory", validator=is_directory, description="Path to a directory"),
    SubtypeManifest(subtype="email", validator=is_email, description="Email address"),
    SubtypeManifest(subtype="url", validator=is_url, description="Absolute http(s), ftp or file URL"),
    SubtypeManifest(subtype="identifier", validator=is_identifier, description="Python-style identifier"),
]
