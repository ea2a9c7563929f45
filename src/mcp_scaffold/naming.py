"""String normalisation utilities used throughout the project."""

from __future__ import annotations

import re

__all__ = [
    "normalize_identifier",
    "sanitize_name",
    "parse_arguments",
    "parse_environment",
]


_SEPARATOR = re.compile(r"[-_]")
_INVALID_NAME_CHARACTERS = re.compile(r"[^a-z0-9-]")


def _capitalize_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def normalize_identifier(value: str | None) -> str:
    """Return a capitalized, separator free identifier generated from ``value``.

    Input without a hyphen or underscore only has its first character
    upper-cased, so interior casing such as ``alreadyPascal`` is preserved.
    Otherwise the input is split on ``-`` and ``_``, empty segments are dropped
    and every segment is capitalized with the remainder lower-cased before the
    segments are joined back together.

    ``None`` and the empty string both yield ``""``.
    """

    if not value:
        return ""

    if _SEPARATOR.search(value) is None:
        return _capitalize_first(value)

    segments = [segment for segment in _SEPARATOR.split(value) if segment]
    return "".join(_capitalize_first(segment[:1] + segment[1:].lower()) for segment in segments)


def sanitize_name(value: str) -> str:
    """Return the directory and package manifest name for ``value``.

    The name is lower-cased and everything outside ``[a-z0-9-]`` is removed.
    """

    return _INVALID_NAME_CHARACTERS.sub("", value.lower())


def parse_arguments(raw: str) -> tuple[str, ...]:
    """Split a comma separated argument list, dropping blank entries."""

    return tuple(part.strip() for part in raw.split(",") if part.strip())


def parse_environment(raw: str) -> dict[str, str]:
    """Parse ``KEY=VALUE`` pairs separated by commas.

    Pairs with an empty key or value are ignored.
    """

    environment: dict[str, str] = {}
    for pair in raw.split(","):
        if "=" not in pair:
            continue
        key, value = pair.split("=", 1)
        key = key.strip()
        value = value.strip()
        if key and value:
            environment[key] = value
    return environment
