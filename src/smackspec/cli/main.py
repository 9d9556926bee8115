#!/usr/bin/env python3
"""
SMACKSPEC CLI
-------------
Thin command-line front end over the batch engine:

    smackspec check FILE... [--yaml] [--verbose]
    smackspec render FILE

Files are taken exactly as listed; no directory is walked.

Author: Smackspec Team
Date: 2026-10-18
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

from smackspec.cli.formatter import SpecFormatter, console
from smackspec.core.engine import SpecAuditEngine
from smackspec.core.errors import SpecError
from smackspec.export.renderer import SpecRenderer
from smackspec.parsing.pipeline import parse_file

VERSION = "0.1.0"


class SmackspecCLI:
    """
    CLI wrapper that translates user commands into Engine actions.
    """

    def __init__(self):
        self.parser = argparse.ArgumentParser(
            prog="smackspec",
            description="Smackspec - package manifest validator",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self.formatter = SpecFormatter()
        self._setup_args()

    def _setup_args(self):
        self.parser.add_argument("-V", "--version", action="version", version=f"smackspec v{VERSION}")
        self.parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        check_parser = subparsers.add_parser("check", help="Validate one or more spec files")
        check_parser.add_argument("paths", nargs="+", help="Spec files to check")
        check_parser.add_argument("--yaml", action="store_true", help="Show the YAML view of valid manifests")

        render_parser = subparsers.add_parser("render", help="Print the canonical form of a spec file")
        render_parser.add_argument("path", help="Spec file to render")

    def _configure_logging(self, verbose: bool):
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s"
        )

    def _run_check(self, args: argparse.Namespace) -> int:
        engine = SpecAuditEngine(export=args.yaml)
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(bar_width=40),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=console,
            transient=True
        ) as progress:
            task_id = progress.add_task("Checking spec files...", total=len(args.paths))

            def advance(done: int, total: int):
                progress.update(task_id, completed=done, description=f"Checked: {escape(str(args.paths[done - 1]))}")

            reports = engine.check_files(args.paths, progress_callback=advance)

        if args.yaml:
            for r in reports:
                if r.get("export"):
                    self.formatter.show_export(r["file_path"], r["export"])

        self.formatter.print_final_table(reports)
        self.formatter.print_summary(engine.generate_summary(reports))
        return 0 if all(r["success"] for r in reports) else 1

    def _run_render(self, args: argparse.Namespace) -> int:
        try:
            manifest = parse_file(args.path)
        except SpecError as e:
            console.print(f"[bold red]Error:[/bold red] {escape(args.path)}: {escape(str(e))}")
            return 1
        except (OSError, UnicodeDecodeError) as e:
            console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
            return 1
        self.formatter.show_text(SpecRenderer().render(manifest))
        return 0

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point."""
        args = self.parser.parse_args(argv)
        self._configure_logging(args.verbose)

        if args.command == "check":
            return self._run_check(args)
        if args.command == "render":
            return self._run_render(args)
        self.parser.print_help()
        return 2


def main():
    """Application entry point with interrupt handling."""
    try:
        sys.exit(SmackspecCLI().run())
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
