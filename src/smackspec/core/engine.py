#!/usr/bin/env python3
"""
SMACKSPEC ENGINE - Batch Checker
--------------------------------
Runs the parsing pipeline over an explicit list of spec files and turns
each outcome into a report dictionary. Failures are logged and reported,
never raised, so one bad file cannot stop a batch.

Author: Smackspec Team
Date: 2026-10-18
"""

import logging
import time
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from smackspec.core.errors import SpecError
from smackspec.core.version import SemanticVersion
from smackspec.export.exporter import ManifestExporter
from smackspec.parsing.classifier import VersionParser
from smackspec.parsing.pipeline import SpecPipeline

logger = logging.getLogger("smackspec.engine")


class SpecAuditEngine:
    """
    Coordinates the pipeline and the YAML exporter for batch checks.
    """

    def __init__(self, version_parser: VersionParser = SemanticVersion.parse,
                 export: bool = False):
        """
        Args:
            version_parser: Version model handed to the pipeline.
            export: Attach the YAML view of every valid manifest to its report.
        """
        self.pipeline = SpecPipeline(version_parser)
        self.exporter = ManifestExporter()
        self.export = export

    def check_file(self, path: Union[str, Path]) -> Dict[str, Any]:
        """Parses one file and reports the outcome."""
        path = Path(path)
        try:
            manifest = self.pipeline.parse_file(path)
        except SpecError as e:
            logger.warning(f"{path}: {e}")
            return self._file_error(path, "INVALID", e.message, e.line)
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Unable to read {path}: {e}")
            return self._file_error(path, "READ_ERROR", str(e))

        report = {
            "file_path": str(path),
            "success": True,
            "status": "VALID",
            "package": manifest.package_name,
            "version": str(manifest.version),
            "requires": [(r.package_name, r.constraint) for r in manifest.requires],
            "error": None,
            "line": None,
            "timestamp": time.time(),
        }
        if self.export:
            report["export"] = self.exporter.export(manifest)
        return report

    def check_files(self, paths: Iterable[Union[str, Path]],
                    progress_callback: Optional[Callable[[int, int], None]] = None) -> List[Dict[str, Any]]:
        """Checks each listed file in order. No directory traversal."""
        paths = list(paths)
        reports = []
        for processed, path in enumerate(paths, 1):
            reports.append(self.check_file(path))
            if progress_callback:
                progress_callback(processed, len(paths))
        return reports

    def generate_summary(self, reports: List[Dict[str, Any]]) -> Dict[str, Any]:
        if not reports:
            return {"total_files": 0, "success_rate": 0, "valid": 0, "invalid": 0, "read_errors": 0}

        total = len(reports)
        valid = sum(1 for r in reports if r.get("success", False))
        return {
            "total_files": total,
            "success_rate": valid / total,
            "valid": valid,
            "invalid": sum(1 for r in reports if r.get("status") == "INVALID"),
            "read_errors": sum(1 for r in reports if r.get("status") == "READ_ERROR"),
            "summary_timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
        }

    def _file_error(self, path: Path, status: str, error: str, line: Optional[int] = None) -> Dict[str, Any]:
        return {
            "file_path": str(path), "status": status, "error": error, "line": line,
            "success": False, "package": None, "version": None, "requires": [],
            "timestamp": time.time(),
        }
