#!/usr/bin/env python3
"""
SMACKSPEC PARSING PIPELINE
--------------------------
The central coordinator. Runs the four stages in a strict order and stops
at the first error, so callers either get a complete Manifest or a
SpecError naming the line at fault. Nothing is kept between runs.

    LineReader -> DirectiveAssembler -> DirectiveClassifier -> ManifestBuilder

Author: Smackspec Team
Date: 2026-10-18
"""

import logging
from pathlib import Path
from typing import Sequence, Union

from smackspec.core.models import Manifest, RawLine
from smackspec.core.version import SemanticVersion
from smackspec.parsing.assembler import DirectiveAssembler
from smackspec.parsing.builder import ManifestBuilder
from smackspec.parsing.classifier import DirectiveClassifier, VersionParser
from smackspec.parsing.reader import LineReader

logger = logging.getLogger("smackspec.pipeline")


class SpecPipeline:
    """
    The Orchestrator: reading, assembly, classification and validation
    happen in a strictly defined order.
    """

    def __init__(self, version_parser: VersionParser = SemanticVersion.parse):
        """
        Args:
            version_parser: Parses the version token of 'provides'. Must raise
                InvalidVersionError on bad input.
        """
        self.reader = LineReader()
        self.assembler = DirectiveAssembler()
        self.classifier = DirectiveClassifier(version_parser)
        self.builder = ManifestBuilder()

    def run(self, lines: Sequence[RawLine]) -> Manifest:
        # --- PHASE 1: LEGACY LEADING-BLANK SKIP ---
        lines = self.reader.skip_leading_blank(lines)

        # --- PHASE 2: CONTINUATION ASSEMBLY ---
        raw_directives = self.assembler.assemble(lines)
        logger.debug("Assembled %d directive(s) from %d line(s)", len(raw_directives), len(lines))

        # --- PHASE 3: CLASSIFICATION ---
        directives = self.classifier.classify_all(raw_directives)

        # --- PHASE 4: CARDINALITY & ASSEMBLY OF THE MANIFEST ---
        manifest = self.builder.build(directives)
        logger.debug("Parsed manifest for %s %s", manifest.package_name, manifest.version)
        return manifest

    def parse_text(self, text: str) -> Manifest:
        return self.run(self.reader.read_text(text))

    def parse_file(self, path: Union[str, Path]) -> Manifest:
        logger.debug("Reading %s", path)
        return self.run(self.reader.read_file(path))


def parse_text(text: str) -> Manifest:
    """Parses smackspec text held in memory."""
    return SpecPipeline().parse_text(text)


def parse_file(path: Union[str, Path]) -> Manifest:
    """Parses a smackspec file. OSError from opening/reading propagates."""
    return SpecPipeline().parse_file(path)
