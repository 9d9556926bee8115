#!/usr/bin/env python3
"""
SMACKSPEC DIRECTIVE CLASSIFIER (Stage 3)
----------------------------------------
Maps each RawDirective onto its typed variant. 'provides' and 'requires'
are tokenized here; every other recognized key is passed through verbatim.
Keys outside DirectiveKey are rejected: the format is closed.

Author: Smackspec Team
Date: 2026-10-18
"""

import logging
from typing import Callable, Iterable, List

from smackspec.core.errors import (
    InvalidVersionError,
    MalformedProvidesError,
    MalformedRequiresError,
    UnknownKeyError,
)
from smackspec.core.models import (
    Comment,
    Description,
    Directive,
    DirectiveKey,
    Provides,
    RawDirective,
    Requires,
    Unparsed,
)
from smackspec.core.version import SemanticVersion

logger = logging.getLogger("smackspec.classifier")

VersionParser = Callable[[str], SemanticVersion]


class DirectiveClassifier:
    """
    Dispatches on DirectiveKey. The version parser is injectable so callers
    can plug in a different version model.
    """

    def __init__(self, version_parser: VersionParser = SemanticVersion.parse):
        self.version_parser = version_parser

    def _text_payload(self, raw: RawDirective) -> str:
        # Drops the gap after ':' (and the line break when the value starts
        # on a continuation line); the rest stays verbatim
        return raw.value.lstrip()

    def _parse_provides(self, raw: RawDirective) -> Provides:
        line = raw.position.line
        tokens = raw.value.split()
        if len(tokens) != 2:
            raise MalformedProvidesError(
                f"provides expects '<package> <version>', got {len(tokens)} token(s)", line
            )
        name, version_text = tokens
        try:
            version = self.version_parser(version_text)
        except InvalidVersionError as e:
            raise MalformedProvidesError(str(e), line) from e
        return Provides(package_name=name, version=version, position=raw.position)

    def _parse_requires(self, raw: RawDirective) -> Requires:
        tokens = raw.value.split()
        if not tokens:
            raise MalformedRequiresError("requires expects '<package> <constraint>'", raw.position.line)
        return Requires(
            package_name=tokens[0],
            constraint=" ".join(tokens[1:]),
            position=raw.position
        )

    def classify(self, raw: RawDirective) -> Directive:
        key = DirectiveKey.lookup(raw.key)
        if key is None:
            raise UnknownKeyError(raw.key, raw.position.line)

        if key is DirectiveKey.PROVIDES:
            return self._parse_provides(raw)
        if key is DirectiveKey.REQUIRES:
            return self._parse_requires(raw)
        if key is DirectiveKey.COMMENT:
            return Comment(position=raw.position)
        if key is DirectiveKey.DESCRIPTION:
            return Description(text=self._text_payload(raw), position=raw.position)
        return Unparsed(key=key, value=self._text_payload(raw), position=raw.position)

    def classify_all(self, raw_directives: Iterable[RawDirective]) -> List[Directive]:
        directives = [self.classify(raw) for raw in raw_directives]
        logger.debug("Classified %d directive(s)", len(directives))
        return directives
