# src/kubegather/cli/formatter.py
import io
from typing import Any, Dict, List

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from ruamel.yaml import YAML

from kubegather.core.errors import KubeGatherError
from kubegather.core.models import ParsedResource

console = Console()


class GatherFormatter:
    """
    GatherFormatter: renders extracted resources and sweep reports.
    The core never prints; everything user-facing goes through here.
    """

    def __init__(self, out: Console = None):
        self.console = out or console
        self.yaml = YAML(typ='rt')
        # Standard K8s: 2 spaces, sequences indented 4 (offset 2)
        self.yaml.indent(mapping=2, sequence=4, offset=2)
        self.yaml.width = 4096

    def to_yaml(self, resource: ParsedResource) -> str:
        """Original text when the file held only this resource, otherwise a fresh dump."""
        if resource.raw is not None:
            return resource.raw
        stream = io.StringIO()
        self.yaml.dump(resource.document, stream)
        return stream.getvalue()

    def print_error(self, error: KubeGatherError):
        self.console.print(f"[bold red]Error ({error.code}):[/bold red] {escape(error.message)}")

    def print_names(self, resources: List[ParsedResource]):
        for r in resources:
            self.console.print(r.name or "<unnamed>", highlight=False)

    def print_yaml(self, resources: List[ParsedResource]):
        for i, r in enumerate(resources):
            if i > 0:
                self.console.print("---", highlight=False)
            self.console.print(Syntax(self.to_yaml(r).rstrip(), "yaml", theme="monokai", background_color="default"))

    def print_resource_table(self, title: str, resources: List[ParsedResource]):
        table = Table(title=title, header_style="bold magenta")
        table.add_column("Name", style="cyan")
        table.add_column("Namespace")
        table.add_column("Kind")
        table.add_column("Source", style="dim")

        for r in resources:
            table.add_row(
                str(r.name or "<unnamed>"),
                str(r.namespace or "-"),
                str(r.resource_kind or "-"),
                r.source_path.name + ("" if r.raw is not None else " (list)"),
            )
        self.console.print(table)

    def print_sweep_report(self, reports: List[Dict[str, Any]], summary: Dict[str, Any]):
        table = Table(title="KubeGather Inspection Report", show_lines=True, header_style="bold magenta")
        table.add_column("Resource", style="cyan")
        table.add_column("Namespace", style="white")
        table.add_column("Status", style="bold")
        table.add_column("Count", justify="right")
        table.add_column("Result", justify="center")

        for r in reports:
            success = r.get("success", False)
            missing = r.get("status") == "NOT_FOUND"
            status_color = "green" if success else "yellow" if missing else "red"
            result_icon = "✅" if success else "➖" if missing else "❌"
            table.add_row(
                r.get("resource"),
                r.get("namespace") or "(cluster)",
                f"[{status_color}]{r.get('status')}[/{status_color}]",
                str(r.get("count", 0)),
                result_icon,
            )
        self.console.print(table)

        for r in reports:
            if not r.get("success") and r.get("status") != "NOT_FOUND":
                self.console.print(f"[bold red]{r['resource']}:[/bold red] {escape(str(r.get('error')))}")

        self.console.print(Panel(
            f"[bold white]Summary Report[/bold white]\n"
            f"════════════════════════════════════════\n"
            f"Resource Types:  {summary['resource_types']}\n"
            f"Found:           [green]{summary['found']}[/green]\n"
            f"Missing:         [yellow]{summary['missing']}[/yellow]\n"
            f"Errors:          [red]{summary['errors']}[/red]\n"
            f"Total Resources: {summary['total_resources']}",
            border_style="dim"
        ))
