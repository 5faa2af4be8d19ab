#!/usr/bin/env python3
"""
Template System CLI

Main command-line interface for template assembly.
"""

import argparse
import json
import logging
import os
import sys

from ..error_handling import AssemblySystemError, format_user_error
from .commands import AssemblyCLI


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Component template assembly CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config-dir",
        default="config",
        help="Directory holding assembly-config.yaml and .env files (default: config)",
    )
    parser.add_argument(
        "--environment",
        "-e",
        default=None,
        help="Environment used to select .env.<environment> (default: development)",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "WARNING"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    generate_parser = subparsers.add_parser(
        "generate", help="Generate the template from all enabled components"
    )
    generate_parser.add_argument(
        "--resolved",
        action="store_true",
        help="Use literal values from the environment instead of placeholders",
    )
    generate_parser.add_argument(
        "--format", choices=["yaml", "json"], default=None, help="Output format"
    )
    generate_parser.add_argument("--output", "-o", help="Write the template to a file")

    objects_parser = subparsers.add_parser(
        "objects", help="Print the objects of a single component"
    )
    objects_parser.add_argument("--component", "-c", required=True)
    objects_parser.add_argument("--resolved", action="store_true")
    objects_parser.add_argument("--format", choices=["yaml", "json"], default=None)

    list_parser = subparsers.add_parser(
        "list-components", help="List registered components"
    )
    list_parser.add_argument(
        "--format", choices=["table", "json"], default="table", help="Output format"
    )

    summary_parser = subparsers.add_parser(
        "summary", help="Show what the composed template contains"
    )
    summary_parser.add_argument("--resolved", action="store_true")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        cli = AssemblyCLI(args.config_dir, args.environment)
        return execute_command(cli, args)
    except AssemblySystemError as e:
        print(format_user_error(e), file=sys.stderr)
        return 1


def execute_command(cli: AssemblyCLI, args) -> int:
    """Execute the specified command."""

    if args.command == "generate":
        return cmd_generate(cli, args)
    elif args.command == "objects":
        return cmd_objects(cli, args)
    elif args.command == "list-components":
        return cmd_list_components(cli, args)
    elif args.command == "summary":
        return cmd_summary(cli, args)
    else:
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return 1


def cmd_generate(cli: AssemblyCLI, args) -> int:
    """Execute generate command."""
    content = cli.generate(args.resolved, args.format, args.output)
    if args.output:
        print(f"✓ Template written to {args.output}")
    else:
        print(content)
    return 0


def cmd_objects(cli: AssemblyCLI, args) -> int:
    """Execute objects command."""
    print(cli.get_objects(args.component, args.resolved, args.format))
    return 0


def cmd_list_components(cli: AssemblyCLI, args) -> int:
    """Execute list-components command."""
    components = cli.list_components()

    if args.format == "json":
        print(json.dumps(components, indent=2))
        return 0

    width = max([len("Name")] + [len(c["name"]) for c in components])
    print(f"{'Name'.ljust(width)} | Enabled")
    print("-" * (width + 10))
    for component in components:
        enabled = "✓" if component["enabled"] else "✗"
        print(f"{component['name'].ljust(width)} | {enabled}")

    return 0


def cmd_summary(cli: AssemblyCLI, args) -> int:
    """Execute summary command."""
    summary = cli.get_summary(args.resolved)

    print(f"Template: {summary['template']}")
    print(f"  Components: {', '.join(summary['components'])}")
    print(f"  Parameters: {summary['parameter_count']}")
    print(f"  Objects: {summary['object_count']}")
    if summary["duplicate_parameters"]:
        print(f"  Duplicate parameters: {', '.join(summary['duplicate_parameters'])}")
    for obj in summary["objects"]:
        print(f"    {obj['kind']}/{obj['name']}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
