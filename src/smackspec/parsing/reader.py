#!/usr/bin/env python3
"""
SMACKSPEC LINE READER (Stage 1)
-------------------------------
Turns a file or an in-memory string into numbered RawLines. Nothing is
dropped or merged here except the leading blank lines the legacy format
tolerates before its first directive.

Author: Smackspec Team
Date: 2026-10-18
"""

import io
from pathlib import Path
from typing import Iterable, Tuple, TextIO, Union

from smackspec.core.models import RawLine, SourcePosition

BOM = '\ufeff'


class LineReader:
    """
    Numbers lines from 1 and keeps each line's '\\n' terminator so that
    continuation values can be joined verbatim later on.
    """

    def read_stream(self, stream: TextIO) -> Tuple[RawLine, ...]:
        lines = []
        for i, text in enumerate(stream, 1):
            if i == 1:
                text = text.lstrip(BOM)
            lines.append(RawLine(text=text, position=SourcePosition(i)))
        return tuple(lines)

    def read_text(self, text: str) -> Tuple[RawLine, ...]:
        # newline='\n': only LF ends a line, and '\r' is left in place
        return self.read_stream(io.StringIO(text, newline='\n'))

    def read_file(self, path: Union[str, Path]) -> Tuple[RawLine, ...]:
        with open(path, 'r', encoding='utf-8', newline='\n') as handle:
            return self.read_stream(handle)

    @staticmethod
    def skip_leading_blank(lines: Iterable[RawLine]) -> Tuple[RawLine, ...]:
        """Drops whitespace-only lines before the first directive."""
        lines = tuple(lines)
        start = 0
        while start < len(lines) and not lines[start].text.strip():
            start += 1
        return lines[start:]
