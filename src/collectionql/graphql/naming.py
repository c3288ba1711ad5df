"""Naming conventions for generated GraphQL names."""

from __future__ import annotations

import re

_WORD = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")


def _words(name: str) -> list[str]:
    return _WORD.findall(name)


def format_type_name(name: str) -> str:
    """``"person-address"`` -> ``"PersonAddress"``."""
    return "".join(w[:1].upper() + w[1:].lower() for w in _words(name))


def format_field_name(name: str) -> str:
    """``"people-by-author_id"`` -> ``"peopleByAuthorId"``."""
    words = _words(name)
    if not words:
        return ""
    return words[0].lower() + "".join(w[:1].upper() + w[1:].lower() for w in words[1:])
