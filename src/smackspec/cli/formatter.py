# src/smackspec/cli/formatter.py
import sys
from typing import Any, Dict, List

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

# Initialize the Rich console for high-quality terminal output
console = Console()


class SpecFormatter:
    """
    SpecFormatter: The visual side of the CLI.
    Renders per-file reports, YAML views and the closing summary.
    """

    def __init__(self, out: Console = console):
        self.console = out

    def show_export(self, file_path: str, yaml_text: str):
        syntax = Syntax(yaml_text.rstrip(), "yaml", theme="monokai", line_numbers=True)
        self.console.print(Panel(syntax, title=f"Manifest: {escape(file_path)}", border_style="green"))

    def show_text(self, text: str):
        """Writes text unchanged; no wrapping, emoji or tab expansion."""
        sys.stdout.write(text)

    def print_final_table(self, reports: List[Dict[str, Any]]):
        """Builds the summary table shown at the very end of a check."""
        table = Table(title="Smackspec Check Report", show_lines=True, header_style="bold magenta")
        table.add_column("File Path", style="cyan")
        table.add_column("Package", style="white")
        table.add_column("Status", style="bold")
        table.add_column("Details")
        table.add_column("Result", justify="center")

        for r in reports:
            success = r.get("success", False)
            status_color = "green" if success else "red"
            if success:
                package = f"{r.get('package')} {r.get('version')}"
                details = f"{len(r.get('requires', []))} requirement(s)"
            else:
                package = "-"
                line = r.get("line")
                details = f"line {line}: {r.get('error')}" if line else str(r.get("error"))

            table.add_row(
                escape(str(r.get("file_path"))),
                escape(package),
                f"[{status_color}]{r.get('status')}[/{status_color}]",
                escape(details),
                "✅" if success else "❌"
            )

        self.console.print(table)

    def print_summary(self, summary: Dict[str, Any]):
        self.console.print(Panel(
            f"[bold white]Summary Report[/bold white]\n"
            f"════════════════════════════════════════\n"
            f"Total Files:  {summary['total_files']}\n"
            f"Valid:        [green]{summary['valid']}[/green]\n"
            f"Invalid:      [red]{summary['invalid']}[/red]\n"
            f"Read Errors:  [red]{summary['read_errors']}[/red]",
            border_style="dim"
        ))
