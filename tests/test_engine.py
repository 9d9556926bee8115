#!/usr/bin/env python3
"""
SMACKSPEC ENGINE & CLI SUITE
----------------------------
Batch checking over real files: reports, summaries, exit codes and the
guarantee that one broken file never stops the rest of a batch.

Author: Smackspec Team
Date: 2026-10-18
"""

import logging

import pytest
from ruamel.yaml import YAML

from smackspec.cli.main import SmackspecCLI
from smackspec.core.engine import SpecAuditEngine
from smackspec.export.renderer import SpecRenderer
from smackspec.parsing.pipeline import parse_file, parse_text

VALID = "provides: widget 1.2.3\nrequires: base >= 1.0.0\nrequires: io ^2\n"
INVALID = "provides: widget 1.2.3\nfoo: bar\n"


@pytest.fixture
def spec_dir(tmp_path):
    (tmp_path / "good.smackspec").write_text(VALID, encoding="utf-8")
    (tmp_path / "bad.smackspec").write_text(INVALID, encoding="utf-8")
    (tmp_path / "binary.smackspec").write_bytes(b"\xff\xfe\x00garbage")
    return tmp_path


def test_check_valid_file(spec_dir):
    report = SpecAuditEngine().check_file(spec_dir / "good.smackspec")

    assert report["success"] is True
    assert report["status"] == "VALID"
    assert report["package"] == "widget"
    assert report["version"] == "1.2.3"
    assert report["requires"] == [("base", ">= 1.0.0"), ("io", "^2")]
    assert "export" not in report


def test_check_invalid_file_reports_line(spec_dir, caplog):
    with caplog.at_level(logging.WARNING, logger="smackspec.engine"):
        report = SpecAuditEngine().check_file(spec_dir / "bad.smackspec")

    assert report["success"] is False
    assert report["status"] == "INVALID"
    assert report["line"] == 2
    assert "foo" in report["error"]
    assert any("bad.smackspec" in rec.getMessage() for rec in caplog.records)


def test_check_unreadable_files(spec_dir):
    engine = SpecAuditEngine()
    missing = engine.check_file(spec_dir / "absent.smackspec")
    garbage = engine.check_file(spec_dir / "binary.smackspec")

    assert missing["status"] == "READ_ERROR"
    assert garbage["status"] == "READ_ERROR"
    assert missing["success"] is False


def test_check_files_keeps_going(spec_dir):
    """
    STABILITY TEST: a broken file in the middle of a batch must not stop
    the files after it from being checked.
    """
    progress = []
    engine = SpecAuditEngine()
    reports = engine.check_files(
        [spec_dir / "bad.smackspec", spec_dir / "binary.smackspec", spec_dir / "good.smackspec"],
        progress_callback=lambda done, total: progress.append((done, total)),
    )

    assert [r["status"] for r in reports] == ["INVALID", "READ_ERROR", "VALID"]
    assert progress == [(1, 3), (2, 3), (3, 3)]

    summary = engine.generate_summary(reports)
    assert summary["total_files"] == 3
    assert summary["valid"] == 1
    assert summary["invalid"] == 1
    assert summary["read_errors"] == 1
    assert summary["success_rate"] == pytest.approx(1 / 3)


def test_empty_summary():
    assert SpecAuditEngine().generate_summary([])["total_files"] == 0


def test_export_attached_to_valid_reports(spec_dir):
    report = SpecAuditEngine(export=True).check_file(spec_dir / "good.smackspec")
    data = YAML(typ='safe').load(report["export"])
    assert data["provides"]["package"] == "widget"


def test_cli_check_exit_codes(spec_dir):
    cli = SmackspecCLI()
    assert cli.run(["check", str(spec_dir / "good.smackspec")]) == 0
    assert cli.run(["check", str(spec_dir / "good.smackspec"), str(spec_dir / "bad.smackspec")]) == 1


def test_cli_check_with_yaml(spec_dir):
    assert SmackspecCLI().run(["check", "--yaml", str(spec_dir / "good.smackspec")]) == 0


def test_cli_render(spec_dir, capsys):
    path = spec_dir / "messy.smackspec"
    path.write_text("\nrequires: io ^2\nlicense:   MIT\nprovides: widget v1.2.3\n", encoding="utf-8")

    assert SmackspecCLI().run(["render", str(path)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["provides: widget 1.2.3", "license: MIT", "requires: io ^2"]


def test_cli_render_failure(spec_dir):
    assert SmackspecCLI().run(["render", str(spec_dir / "bad.smackspec")]) == 1
    assert SmackspecCLI().run(["render", str(spec_dir / "absent.smackspec")]) == 1


def test_cli_without_command():
    assert SmackspecCLI().run([]) == 2


def test_cli_render_writes_canonical_text_unchanged(spec_dir, capsys):
    """
    INTEGRITY TEST: render output must be the exact canonical text, with no
    terminal wrapping, emoji substitution or tab expansion.
    """
    long_description = " ".join(["word"] * 50)
    path = spec_dir / "long.smackspec"
    path.write_text(
        "provides: widget 1.2.3\n"
        f"description: {long_description}\n"
        "license: see :thumbs_up:\n"
        "build: make\n"
        "\tmake check\n",
        encoding="utf-8",
    )

    assert SmackspecCLI().run(["render", str(path)]) == 0
    out = capsys.readouterr().out
    assert out == SpecRenderer().render(parse_file(path))
    assert "\tmake check\n" in out
    assert ":thumbs_up:" in out
    assert parse_text(out) == parse_file(path)


def test_cli_check_goes_through_batch_engine(spec_dir, monkeypatch):
    calls = []
    original = SpecAuditEngine.check_files

    def recording(self, paths, progress_callback=None):
        calls.append(list(paths))
        return original(self, paths, progress_callback=progress_callback)

    monkeypatch.setattr(SpecAuditEngine, "check_files", recording)
    paths = [str(spec_dir / "good.smackspec"), str(spec_dir / "bad.smackspec")]

    assert SmackspecCLI().run(["check"] + paths) == 1
    assert calls == [paths]
