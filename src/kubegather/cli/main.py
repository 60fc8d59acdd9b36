#!/usr/bin/env python3
"""
KUBEGATHER CLI - must-gather Reader
-----------------------------------
Command line front-end over the GatherEngine:

  kubegather root <path>                      Print the located bundle root
  kubegather namespaces <path>                List namespaces in the bundle
  kubegather get <path> <type> [-n NS]        List one resource type
  kubegather inspect <path> [-n NS] [types]   Sweep many types and report

Author: KubeGather Team
Date: 2026-10-18
"""

import sys
import logging
import argparse
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from kubegather.cli.formatter import GatherFormatter
from kubegather.core.config import GatherSettings, DEFAULT_MAX_ROOT_DEPTH
from kubegather.core.engine import GatherEngine
from kubegather.core.errors import KubeGatherError
from kubegather.resources.catalog import build_default_registry
from kubegather.resources.descriptor import ResourceRegistry

VERSION = "kubegather v0.1.0"

console = Console()


def setup_logging(verbose: bool = False, out: Optional[Console] = None):
    """Routes library loggers through rich. Only the CLI configures handlers."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=out or console, show_path=False)],
        force=True,
    )


class KubeGatherCLI:
    """
    CLI wrapper that translates user commands into engine queries.
    Every command returns a process exit code; typed errors map to 1.
    """

    def __init__(self, registry: Optional[ResourceRegistry] = None, out: Optional[Console] = None):
        self.registry = registry or build_default_registry()
        self.console = out or console
        self.formatter = GatherFormatter(self.console)
        self.parser = argparse.ArgumentParser(
            prog="kubegather",
            description="KubeGather - Read resources out of must-gather bundles",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self._setup_args()

    def _setup_args(self):
        """Configures the command-line flags and subcommands."""
        self.parser.add_argument("--version", action="version", version=VERSION)
        self.parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
        self.parser.add_argument("--max-depth", type=int, default=DEFAULT_MAX_ROOT_DEPTH,
                                 help=f"Wrapper directories to descend while locating the root (default: {DEFAULT_MAX_ROOT_DEPTH})")
        self.parser.add_argument("--ext", action="append", dest="extensions",
                                 help="Document file extension to read (repeatable, default: .yaml)")
        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        root_parser = subparsers.add_parser("root", help="Print the located must-gather root")
        root_parser.add_argument("path", help="Path at or above the must-gather root")

        ns_parser = subparsers.add_parser("namespaces", help="List namespaces captured in the bundle")
        ns_parser.add_argument("path", help="Path at or above the must-gather root")

        get_parser = subparsers.add_parser("get", help="List resources of one type")
        get_parser.add_argument("path", help="Path at or above the must-gather root")
        get_parser.add_argument("resource_type", help="Kind, plural, or plural.group (e.g. machines.machine.openshift.io)")
        get_parser.add_argument("-n", "--namespace", help="Namespace for namespaced kinds")
        get_parser.add_argument("-o", "--output", choices=["table", "yaml", "names"], default="table",
                                help="Output format (default: table)")

        inspect_parser = subparsers.add_parser("inspect", help="Sweep resource types and report what was found")
        inspect_parser.add_argument("path", help="Path at or above the must-gather root")
        inspect_parser.add_argument("resource_types", nargs="*", help="Types to sweep (default: every known type)")
        inspect_parser.add_argument("-n", "--namespace", help="Namespace for namespaced kinds")

    def _settings(self, args: argparse.Namespace) -> GatherSettings:
        return GatherSettings(
            max_root_depth=args.max_depth,
            document_extensions=tuple(args.extensions) if args.extensions else (".yaml",),
        )

    def print_header(self, subtitle: str):
        self.console.print(Panel.fit(
            f"[bold cyan]{VERSION}[/bold cyan]",
            title=f"[bold white]{subtitle}[/bold white]",
            border_style="cyan"
        ))

    def cmd_root(self, engine: GatherEngine, args: argparse.Namespace) -> int:
        self.console.print(str(engine.root.path), highlight=False)
        return 0

    def cmd_namespaces(self, engine: GatherEngine, args: argparse.Namespace) -> int:
        for name in engine.list_namespaces():
            self.console.print(name, highlight=False)
        return 0

    def cmd_get(self, engine: GatherEngine, args: argparse.Namespace) -> int:
        descriptor = self.registry.lookup(args.resource_type)
        resources = engine.collect(descriptor, args.namespace)

        if args.output == "names":
            self.formatter.print_names(resources)
        elif args.output == "yaml":
            self.formatter.print_yaml(resources)
        else:
            scope = f"namespace {args.namespace}" if args.namespace else "cluster scope"
            self.formatter.print_resource_table(f"{descriptor.qualified_name} in {scope}", resources)
        return 0

    def cmd_inspect(self, engine: GatherEngine, args: argparse.Namespace) -> int:
        if args.resource_types:
            descriptors = [self.registry.lookup(name) for name in args.resource_types]
        else:
            descriptors = list(self.registry)

        self.print_header("Bundle Inspection")
        reports = engine.collect_all(descriptors, args.namespace)
        summary = engine.generate_summary(reports)
        self.formatter.print_sweep_report(reports, summary)
        return 0 if summary["errors"] == 0 else 1

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point."""
        args = self.parser.parse_args(argv)
        if not args.command:
            self.parser.print_help()
            return 0

        setup_logging(args.verbose, self.console)
        handler = getattr(self, f"cmd_{args.command}")
        try:
            engine = GatherEngine(args.path, self._settings(args))
            return handler(engine, args)
        except KubeGatherError as e:
            self.formatter.print_error(e)
            return 1


def main():
    """Application entry point with interrupt handling."""
    try:
        sys.exit(KubeGatherCLI().run())
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
