#!/usr/bin/env python3
"""
SMACKSPEC CORE MODELS
---------------------
Defines the fundamental data structures used across the smackspec parser.
Raw models mirror the source text; directive models are the typed form;
Manifest is the validated record handed to callers.

Author: Smackspec Team
Date: 2026-10-18
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

from smackspec.core.version import SemanticVersion


@dataclass(frozen=True)
class SourcePosition:
    """A 1-based line number in the manifest source."""
    line: int


@dataclass(frozen=True)
class RawLine:
    text: str                    # Line text including its '\n' terminator
    position: SourcePosition


@dataclass(frozen=True)
class RawDirective:
    """
    A key and its continuation-joined value, positioned at the key line.
    """
    key: str
    value: str
    position: SourcePosition


class DirectiveKey(str, Enum):
    """The closed set of keys a smackspec file may use."""
    PROVIDES = "provides"
    DESCRIPTION = "description"
    REQUIRES = "requires"
    COMMENT = "comment"
    MAINTAINER = "maintainer"
    KEYWORDS = "keywords"
    UPSTREAM_VERSION = "upstream-version"
    UPSTREAM_URL = "upstream-url"
    GIT = "git"
    SVN = "svn"
    HG = "hg"
    CVS = "cvs"
    DOCUMENTATION_URL = "documentation-url"
    BUG_URL = "bug-url"
    LICENSE = "license"
    PLATFORM = "platform"
    BUILD = "build"
    TEST = "test"
    INSTALL = "install"
    UNINSTALL = "uninstall"
    DOCUMENTATION = "documentation"

    @property
    def field_name(self) -> str:
        """Attribute name on Manifest (e.g. 'upstream-url' -> 'upstream_url')."""
        return self.value.replace("-", "_")

    @classmethod
    def lookup(cls, key: str) -> Optional["DirectiveKey"]:
        try:
            return cls(key)
        except ValueError:
            return None


STRUCTURED_KEYS = (DirectiveKey.PROVIDES, DirectiveKey.DESCRIPTION,
                   DirectiveKey.REQUIRES, DirectiveKey.COMMENT)

# Recognized keys stored verbatim, in canonical rendering order
OPAQUE_KEYS = tuple(key for key in DirectiveKey if key not in STRUCTURED_KEYS)


@dataclass(frozen=True)
class Comment:
    position: SourcePosition = field(compare=False)


@dataclass(frozen=True)
class Provides:
    package_name: str
    version: SemanticVersion
    position: Optional[SourcePosition] = field(default=None, compare=False)


@dataclass(frozen=True)
class Description:
    text: str
    position: SourcePosition = field(compare=False)


@dataclass(frozen=True)
class Requires:
    package_name: str
    constraint: str              # Opaque; validated by the version model's caller
    position: Optional[SourcePosition] = field(default=None, compare=False)


@dataclass(frozen=True)
class Unparsed:
    key: DirectiveKey
    value: str
    position: SourcePosition = field(compare=False)


Directive = Union[Comment, Provides, Description, Requires, Unparsed]


@dataclass(frozen=True)
class Manifest:
    """
    The validated result of parsing one smackspec file.

    Source positions are excluded from equality, so two manifests are equal
    when they describe the same package regardless of layout.
    """
    provides: Provides
    description: Optional[str] = None
    requires: Tuple[Requires, ...] = ()
    maintainer: Optional[str] = None
    keywords: Optional[str] = None
    upstream_version: Optional[str] = None
    upstream_url: Optional[str] = None
    git: Optional[str] = None
    svn: Optional[str] = None
    hg: Optional[str] = None
    cvs: Optional[str] = None
    documentation_url: Optional[str] = None
    bug_url: Optional[str] = None
    license: Optional[str] = None
    platform: Optional[str] = None
    build: Optional[str] = None
    test: Optional[str] = None
    install: Optional[str] = None
    uninstall: Optional[str] = None
    documentation: Optional[str] = None

    @property
    def package_name(self) -> str:
        return self.provides.package_name

    @property
    def version(self) -> SemanticVersion:
        return self.provides.version

    def get(self, key: DirectiveKey) -> Optional[str]:
        """Value of an opaque key, or None when absent."""
        return getattr(self, key.field_name)
