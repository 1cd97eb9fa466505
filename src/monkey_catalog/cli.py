#!/usr/bin/env python3
"""
CLI tool for browsing the monkey catalog.

Usage:
    python -m monkey_catalog.cli                 # interactive menu
    python -m monkey_catalog.cli list
    python -m monkey_catalog.cli find "Japanese Macaque"
    python -m monkey_catalog.cli random
    python -m monkey_catalog.cli external --table
    python -m monkey_catalog.cli all
    python -m monkey_catalog.cli journey Henry
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass

import yaml
from colorama import just_fix_windows_console

from .catalog.loader import load_builtin_catalog, load_catalog
from .catalog.registry import MonkeyCatalog
from .config import Config
from .display import (
    print_error,
    print_heading,
    print_monkey,
    print_monkeys,
    print_not_found,
    print_table,
)
from .errors import CatalogLoadError, EmptyCatalogError, MonkeyCatalogError
from .external.retriever import ExternalRetriever


@dataclass
class AppContext:
    """Shared state for one CLI run - built once in main()."""
    catalog: MonkeyCatalog
    retriever: ExternalRetriever
    config: Config


def build_context(config: Config) -> AppContext:
    """Load the catalog and set up the retriever from config."""
    if config.catalog.definition_file:
        catalog = load_catalog(config.catalog.definition_file)
    else:
        catalog = load_builtin_catalog()
    return AppContext(
        catalog=catalog,
        retriever=ExternalRetriever(config=config.retriever),
        config=config,
    )


def cmd_list(ctx: AppContext, args) -> int:
    """List every local monkey."""
    print_heading("ALL MONKEYS")
    monkeys = ctx.catalog.list_all()
    print_monkeys(monkeys)
    print(f"Total monkeys in database: {len(monkeys)}")
    return 0


def cmd_find(ctx: AppContext, args) -> int:
    """Find a local monkey by name."""
    name = (args.name or "").strip()
    if not name:
        print_error("Please enter a valid monkey name.")
        return 1

    monkey = ctx.catalog.find_by_name(name)
    if monkey is None:
        print_not_found(name, ctx.catalog.names())
        return 1

    print("Monkey found!\n")
    print_monkey(monkey)
    return 0


def cmd_random(ctx: AppContext, args) -> int:
    """Show a random local monkey."""
    try:
        monkey = ctx.catalog.random_pick()
    except EmptyCatalogError as e:
        print_error(str(e))
        return 1

    print_heading("YOUR RANDOM MONKEY IS...")
    print_monkey(monkey)
    return 0


def cmd_external(ctx: AppContext, args) -> int:
    """List monkeys from the external tool server."""
    print("Connecting to the monkey tool server...\n")
    monkeys = ctx.retriever.list_monkeys()
    if not monkeys:
        print_error("No monkeys were returned by the external source.")
        return 1

    print_heading("MONKEYS FROM EXTERNAL SOURCE")
    if getattr(args, "table", False):
        print_table(monkeys)
    else:
        print_monkeys(monkeys)
        print(f"Total external monkeys: {len(monkeys)}")
    return 0


def cmd_all(ctx: AppContext, args) -> int:
    """List local monkeys merged with external ones."""
    external = ctx.retriever.list_monkeys()
    merged = ctx.catalog.merged_with(external)

    print_heading("ALL MONKEYS (LOCAL + EXTERNAL)")
    print_table(merged.list_all())
    print(f"Local: {len(ctx.catalog)}  External: {len(external)}  Shown: {len(merged)}")
    return 0


def cmd_journey(ctx: AppContext, args) -> int:
    """Show the journey the tool server reports for a monkey."""
    journey = ctx.retriever.get_monkey_journey(args.name)
    if journey is None:
        print_error(f"No journey available for '{args.name}'.")
        return 1

    print_heading(f"JOURNEY OF {args.name.upper()}")
    print(journey)
    return 0


def cmd_menu(ctx: AppContext, args) -> int:
    """Run the interactive menu."""
    from .menu import run_menu
    return run_menu(ctx)


COMMANDS = {
    "list": cmd_list,
    "find": cmd_find,
    "random": cmd_random,
    "external": cmd_external,
    "all": cmd_all,
    "journey": cmd_journey,
    "menu": cmd_menu,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="monkey-catalog",
        description="Browse the monkey catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--config",
        help="Path to a YAML config file",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log at INFO level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("list", help="List all local monkeys")

    find_parser = subparsers.add_parser("find", help="Find a local monkey by name")
    find_parser.add_argument("name", help="Monkey name (case-insensitive)")

    subparsers.add_parser("random", help="Show a random local monkey")

    external_parser = subparsers.add_parser("external", help="List monkeys from the tool server")
    external_parser.add_argument("--table", action="store_true", help="Show as a table")

    subparsers.add_parser("all", help="List local and external monkeys together")

    journey_parser = subparsers.add_parser("journey", help="Show a monkey's journey from the tool server")
    journey_parser.add_argument("name", help="Monkey name")

    subparsers.add_parser("menu", help="Interactive menu (default)")

    return parser


def configure_logging(config: Config, verbose: bool) -> None:
    level = "INFO" if verbose else config.logging.level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=config.logging.format,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    just_fix_windows_console()

    try:
        config = Config.from_yaml(args.config) if args.config else Config()
    except (OSError, TypeError, ValueError, yaml.YAMLError) as e:
        print_error(f"Error loading config: {e}")
        return 1
    configure_logging(config, args.verbose)

    try:
        ctx = build_context(config)
    except (CatalogLoadError, FileNotFoundError) as e:
        print_error(f"Error: {e}")
        return 1

    handler = COMMANDS[args.command or "menu"]
    try:
        return handler(ctx, args)
    except MonkeyCatalogError as e:
        print_error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
