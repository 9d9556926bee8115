#!/usr/bin/env python3
"""
SMACKSPEC RENDERER - Canonical Text Form
----------------------------------------
Writes a Manifest back out as smackspec text. The output is canonical:
provides first, then description, opaque keys in DirectiveKey order and
requires last, in their original order.

Author: Smackspec Team
Date: 2026-10-18
"""

import io

from smackspec.core.models import OPAQUE_KEYS, DirectiveKey, Manifest


class SpecRenderer:
    """
    Values are emitted verbatim after 'key: '. Parsed values never start with
    whitespace and their continuation lines always do, so parse(render(m))
    gives back m. A value without a final line break gets one.
    """

    def _write(self, stream: io.StringIO, key: DirectiveKey, value: str):
        stream.write(f"{key.value}: {value}")
        if not value.endswith("\n"):
            stream.write("\n")

    def render(self, manifest: Manifest) -> str:
        stream = io.StringIO()
        provides = manifest.provides
        self._write(stream, DirectiveKey.PROVIDES, f"{provides.package_name} {provides.version}")

        if manifest.description is not None:
            self._write(stream, DirectiveKey.DESCRIPTION, manifest.description)

        for key in OPAQUE_KEYS:
            value = manifest.get(key)
            if value is not None:
                self._write(stream, key, value)

        for req in manifest.requires:
            line = f"{req.package_name} {req.constraint}" if req.constraint else req.package_name
            self._write(stream, DirectiveKey.REQUIRES, line)

        return stream.getvalue()
