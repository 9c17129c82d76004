"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from species_heatmap import __version__
from species_heatmap.config import get_settings
from species_heatmap.flows.fetch import fetch_all
from species_heatmap.reference.species import DEFAULT_SPECIES, load_species
from species_heatmap.store import PointStore

if TYPE_CHECKING:
    from species_heatmap.schemas import Species


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="species-heatmap",
        description="Per-species GBIF occurrence samples for heatmap visualisation",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'fetch' command - sample every species and write its file
    fetch_parser = subparsers.add_parser("fetch", help="Fetch occurrence points from GBIF")
    _add_species_args(fetch_parser)
    fetch_parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Directory for per-species files (default: output_dir from settings)",
    )
    mode = fetch_parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--stratify",
        dest="stratify",
        action="store_true",
        default=None,
        help="Sample each decade (2020s, 2010s, 2000s) separately",
    )
    mode.add_argument(
        "--flat",
        dest="stratify",
        action="store_false",
        help="Sample in API result order with a single quota",
    )
    fetch_parser.add_argument(
        "--year-aware",
        action="store_true",
        default=None,
        help="Keep only records with a year and include it in each point",
    )
    fetch_parser.add_argument("--target", type=int, default=None, help="Point quota (flat)")
    fetch_parser.add_argument(
        "--decade-target", type=int, default=None, help="Point quota per decade (stratified)"
    )
    fetch_parser.add_argument("--page-size", type=int, default=None, help="Records per request")

    # 'list' command - show the species that would be fetched
    list_parser = subparsers.add_parser("list", help="List species and their output files")
    _add_species_args(list_parser)

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    return parser


def _add_species_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--species-file",
        type=Path,
        default=None,
        help="JSON array of {commonName, scientificName} (default: built-in list)",
    )
    parser.add_argument(
        "--only",
        action="append",
        default=None,
        metavar="NAME",
        help="Restrict to species whose common or scientific name matches (repeatable)",
    )


def resolve_species(args: argparse.Namespace) -> list[Species]:
    """Load the species list from --species-file / settings, filtered by --only."""
    settings = get_settings()
    species_file = args.species_file or settings.species_file
    species = load_species(species_file) if species_file else list(DEFAULT_SPECIES)

    if args.only:
        wanted = {name.strip().lower() for name in args.only}
        species = [
            s
            for s in species
            if s.common_name.lower() in wanted or s.scientific_name.lower() in wanted
        ]
    return species


def cmd_fetch(args: argparse.Namespace) -> int:
    """Handle the 'fetch' command."""
    settings = get_settings()
    try:
        species = resolve_species(args)
    except (OSError, ValueError) as exc:
        print(f"Error: could not load species list: {exc}", file=sys.stderr)
        return 1

    if not species:
        print("Error: no species selected", file=sys.stderr)
        return 1

    try:
        config = settings.fetch_config(
            stratify=args.stratify,
            year_aware=args.year_aware,
            target=args.target,
            decade_target=args.decade_target,
            page_size=args.page_size,
        )
    except ValueError as exc:
        print(f"Error: invalid fetch settings: {exc}", file=sys.stderr)
        return 1
    output_dir = args.output_dir or settings.output_dir
    if args.debug:
        print(f"Debug mode enabled. Config: {config}")

    summary = fetch_all(species=species, config=config, output_dir=output_dir)
    if summary["failed"] and not summary["written"]:
        return 1
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """Handle the 'list' command."""
    settings = get_settings()
    try:
        species = resolve_species(args)
    except (OSError, ValueError) as exc:
        print(f"Error: could not load species list: {exc}", file=sys.stderr)
        return 1

    point_store = PointStore(settings.output_dir)
    for s in species:
        marker = "*" if point_store.exists(s) else " "
        print(f"{marker} {s.display_name:<50} {point_store.path_for(s)}")
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Output: {settings.output_dir}")
    try:
        config = settings.fetch_config()
    except ValueError as exc:
        print(f"Error: invalid fetch settings: {exc}", file=sys.stderr)
        return 1
    print(f"Config: {config}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "fetch": cmd_fetch,
        "list": cmd_list,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
