"""Errors raised by the sanitizing package."""
from __future__ import annotations


class SanitizerError(Exception):
    """Base error for this package."""


class UnknownFilterError(SanitizerError, ValueError):
    """A rule names a filter that is not in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No filter found by the name of {name!r}")
        self.name = name


class InvalidFilterError(SanitizerError, TypeError):
    """A registry entry is neither callable nor exposes a callable `apply`."""


class RuleSyntaxError(SanitizerError, ValueError):
    """A rule specification has the wrong type."""


class UnknownProfileError(SanitizerError, KeyError):
    """A named rule profile is not configured."""
