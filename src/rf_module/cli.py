#!/usr/bin/env python3
"""
RF Module - Command Line Interface

Main entry point for the rf-tool command.
Parses frequencies, lists band tables and classifies frequencies and ranges.
"""

import argparse
import logging
import sys
from typing import Optional

from . import __version__
from .core.config import BandPlanConfig, get_preset, list_presets
from .core.errors import RFError
from .core.frequency_range import Range
from .core.hz import parse_hz

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging"""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def _load_plan(plan: str) -> Optional[BandPlanConfig]:
    """Get a preset band plan by name, or load one from a file path."""
    config = get_preset(plan)
    if config is not None:
        return config
    return BandPlanConfig.load(plan)


def cmd_info(args: argparse.Namespace) -> int:
    """Display module information."""
    print(f"RF Module v{__version__}")
    print()
    print("Radio Frequency Values and Band Allocations")
    print("===========================================")
    print()
    print("Band plans:")
    for name in list_presets():
        plan = get_preset(name)
        print(f"  - {name}: {', '.join(plan.table.names())}")
    print()
    print("Frequency units: Hz, kHz, MHz, GHz, THz (any case)")
    return 0


def cmd_parse(args: argparse.Namespace) -> int:
    """Parse frequencies and describe them."""
    for text in args.frequencies:
        try:
            freq = parse_hz(text)
        except RFError as e:
            print(f"Error: {e}")
            return 1

        print(f"{text}:")
        print(f"  Hz:         {float(freq):.0f}")
        print(f"  Formatted:  {freq}")
        print(f"  SI band:    {freq.si_band_name() or '-'}")
        print(f"  ITU band:   {freq.itu_band_name() or '-'}")
        if freq != 0:
            print(f"  Wavelength: {freq.wavelength():.6g} m")

    return 0


def cmd_bands(args: argparse.Namespace) -> int:
    """List the allocations of a band plan."""
    plan = _load_plan(args.plan)
    if plan is None:
        print(f"Unable to load band plan: {args.plan}")
        return 1

    print(f"Band plan: {plan.name}")
    for allocation in plan.table:
        print(f"  {allocation.name:<8} {allocation.range}")

    return 0


def cmd_classify(args: argparse.Namespace) -> int:
    """Show every allocation containing a frequency."""
    plan = _load_plan(args.plan)
    if plan is None:
        print(f"Unable to load band plan: {args.plan}")
        return 1

    try:
        freq = parse_hz(args.frequency)
    except RFError as e:
        print(f"Error: {e}")
        return 1

    matches = plan.table.containing_frequency(freq)
    if not matches:
        print(f"{freq}: no allocation in band plan '{plan.name}'")
        return 0

    for allocation in matches:
        print(f"{freq}: {allocation}")

    return 0


def cmd_range(args: argparse.Namespace) -> int:
    """Describe a frequency range."""
    plan = _load_plan(args.plan)
    if plan is None:
        print(f"Unable to load band plan: {args.plan}")
        return 1

    try:
        span = Range(parse_hz(args.low), parse_hz(args.high))
        if args.shift:
            span = span.add(parse_hz(args.shift))
    except RFError as e:
        print(f"Error: {e}")
        return 1

    print(f"Range:  {span}")
    print(f"Center: {span.center()}")
    print(f"Width:  {span.width()}")

    overlapping = plan.table.overlapping(span)
    names = ", ".join(overlapping.names()) if overlapping else "-"
    print(f"Bands:  {names}")

    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="rf-tool",
        description="RF Module - Radio frequency values and band allocations",
        epilog="Negative frequencies must follow '--', e.g. rf-tool parse -- -10MHz",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Info command
    info_parser = subparsers.add_parser("info", help="Display module information")
    info_parser.set_defaults(func=cmd_info)

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Parse and describe frequencies")
    parse_parser.add_argument(
        "frequencies", nargs="+", help="Frequencies such as 144.39MHz"
    )
    parse_parser.set_defaults(func=cmd_parse)

    plan_help = f"Preset ({', '.join(list_presets())}) or JSON/YAML file (default: itu)"

    # Bands command
    bands_parser = subparsers.add_parser("bands", help="List band plan allocations")
    bands_parser.add_argument("--plan", "-p", default="itu", help=plan_help)
    bands_parser.set_defaults(func=cmd_bands)

    # Classify command
    classify_parser = subparsers.add_parser(
        "classify", help="Find the allocations containing a frequency"
    )
    classify_parser.add_argument("frequency", help="Frequency such as 144.39MHz")
    classify_parser.add_argument("--plan", "-p", default="itu", help=plan_help)
    classify_parser.set_defaults(func=cmd_classify)

    # Range command
    range_parser = subparsers.add_parser("range", help="Describe a frequency range")
    range_parser.add_argument("low", help="Low edge, such as 144MHz")
    range_parser.add_argument("high", help="High edge, such as 148MHz")
    range_parser.add_argument(
        "--shift", "-s", type=str, default=None, help="Shift both edges by this frequency"
    )
    range_parser.add_argument("--plan", "-p", default="itu", help=plan_help)
    range_parser.set_defaults(func=cmd_range)

    return parser


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger.debug(f"rf-tool v{__version__}, command: {args.command}")

    if args.command is None:
        # No command specified - show info
        return cmd_info(args)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
