#!/usr/bin/env python3
"""
SMACKSPEC ERRORS
----------------
Every failure the parser can detect is a SpecError. Subclasses name the kind
of violation so callers can branch on it without parsing messages.

Author: Smackspec Team
Date: 2026-10-18
"""

from typing import Optional


class SpecError(Exception):
    """
    A manifest could not be parsed. Carries the 1-based line of the offending
    directive when one exists.
    """

    def __init__(self, message: str, line: Optional[int] = None):
        self.message = message
        self.line = line
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"line {self.line}: {self.message}"


class MalformedDirectiveError(SpecError):
    """A key line that has no ':' separator."""


class UnknownKeyError(SpecError):
    def __init__(self, key: str, line: int):
        self.key = key
        super().__init__(f"unknown key {key!r}", line)


class MissingRequiredFieldError(SpecError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"a {key} directive is required")


class DuplicateFieldError(SpecError):
    def __init__(self, key: str, line: int):
        self.key = key
        super().__init__(f"duplicate {key} directive", line)


class MalformedProvidesError(SpecError):
    pass


class MalformedRequiresError(SpecError):
    pass


class InvalidVersionError(ValueError):
    """Raised by the version model; the classifier turns it into a SpecError."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"invalid semantic version {text!r}")
