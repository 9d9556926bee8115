#!/usr/bin/env python3
"""
SMACKSPEC VERSION MODEL
-----------------------
Parses the version token of a 'provides' directive into a comparable
SemanticVersion. Constraint satisfaction lives outside this package; only
literal versions are understood here.

Author: Smackspec Team
Date: 2026-10-18
"""

import re
from dataclasses import dataclass
from functools import total_ordering

from smackspec.core.errors import InvalidVersionError


@total_ordering
@dataclass(frozen=True)
class SemanticVersion:
    """
    MAJOR.MINOR.PATCH with an optional special suffix (e.g. 'beta', '-rc.1').
    A suffixed version sorts before the same version without one.
    """
    major: int
    minor: int
    patch: int
    special: str = ""

    # Group 1-3: numeric parts, Group 4: special suffix (dash kept)
    PATTERN = re.compile(r'v?(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)(-?[A-Za-z0-9][A-Za-z0-9.\-]*)?')

    @classmethod
    def parse(cls, text: str) -> "SemanticVersion":
        match = cls.PATTERN.fullmatch(text)
        if not match:
            raise InvalidVersionError(text)
        major, minor, patch, special = match.groups()
        if special and special[0].isdigit():
            # '1.2.03' must not read as patch 0 with special '3'
            raise InvalidVersionError(text)
        return cls(int(major), int(minor), int(patch), special or "")

    def _key(self):
        # Empty special ranks above any prerelease-style suffix
        return (self.major, self.minor, self.patch, self.special == "", self.special)

    def __lt__(self, other: "SemanticVersion") -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}{self.special}"
