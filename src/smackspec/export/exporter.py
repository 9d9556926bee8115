#!/usr/bin/env python3
"""
SMACKSPEC EXPORTER - YAML View
------------------------------
Converts a parsed Manifest into a YAML document for inspection and for
tools that would rather not parse smackspec themselves.

Author: Smackspec Team
Date: 2026-10-18
"""

import io
from typing import List

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap
from ruamel.yaml.scalarstring import LiteralScalarString

from smackspec.core.models import OPAQUE_KEYS, Manifest


class ManifestExporter:
    """
    The Reconstructor: Converts a Manifest into an ordered CommentedMap and
    dumps it. Absent optional fields are left out.
    """

    def __init__(self):
        self.yaml = YAML(typ='rt')
        self.yaml.indent(mapping=2, sequence=4, offset=2)
        self.yaml.width = 4096

    def _scalar(self, value: str):
        """Multi-line values become '|' blocks when that form is lossless."""
        if "\n" not in value or "\r" in value or "\t" in value:
            return value
        if any(line != line.rstrip() for line in value.split("\n")):
            return value
        return LiteralScalarString(value)

    def to_document(self, manifest: Manifest) -> CommentedMap:
        doc = CommentedMap()
        doc["provides"] = CommentedMap([
            ("package", manifest.package_name),
            ("version", str(manifest.version)),
        ])

        if manifest.description is not None:
            doc["description"] = self._scalar(manifest.description)

        for key in OPAQUE_KEYS:
            value = manifest.get(key)
            if value is not None:
                doc[key.value] = self._scalar(value)

        requires: List[CommentedMap] = [
            CommentedMap([("package", req.package_name), ("constraint", req.constraint)])
            for req in manifest.requires
        ]
        if requires:
            doc["requires"] = requires

        doc.yaml_set_start_comment(f"{manifest.package_name} {manifest.version}")
        return doc

    def export(self, manifest: Manifest) -> str:
        stream = io.StringIO()
        self.yaml.dump(self.to_document(manifest), stream)
        return stream.getvalue()
