#!/usr/bin/env python3
"""
SMACKSPEC DIRECTIVE ASSEMBLER (Stage 2)
---------------------------------------
Groups RawLines into RawDirectives. A key line starts at column 0; every
following line that is empty or starts with whitespace belongs to it.

Author: Smackspec Team
Date: 2026-10-18
"""

from typing import List, Sequence, Tuple

from smackspec.core.errors import MalformedDirectiveError
from smackspec.core.models import RawDirective, RawLine

CONTINUATION_MARKERS = ('\r', '\n', ' ', '\t')


class DirectiveAssembler:

    @staticmethod
    def is_continuation(text: str) -> bool:
        return text == "" or text.startswith(CONTINUATION_MARKERS)

    def _split_key_line(self, line: RawLine) -> Tuple[str, str]:
        """Only the first ':' separates key from value."""
        if self.is_continuation(line.text):
            raise MalformedDirectiveError(
                f"continuation line before any key: {line.text.rstrip()!r}",
                line.position.line
            )
        key, sep, value = line.text.partition(':')
        if not sep:
            raise MalformedDirectiveError(
                f"expected '<key>:<value>', got {line.text.rstrip()!r}",
                line.position.line
            )
        return key, value

    def assemble(self, lines: Sequence[RawLine]) -> List[RawDirective]:
        directives = []
        i = 0
        while i < len(lines):
            key_line = lines[i]
            key, value = self._split_key_line(key_line)
            i += 1

            # Greedy continuation: fragments are concatenated with no separator
            fragments = [value]
            while i < len(lines) and self.is_continuation(lines[i].text):
                fragments.append(lines[i].text)
                i += 1

            directives.append(RawDirective(
                key=key,
                value="".join(fragments),
                position=key_line.position
            ))
        return directives
