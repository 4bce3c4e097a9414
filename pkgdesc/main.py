"""Main CLI entry point for pkgdesc.

Provides commands: generate, order, packages
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger("pkgdesc.cli")

# Trigger built-in package registration
import pkgdesc.packages

from pkgdesc.cli.generate import generate_command
from pkgdesc.cli.order import order_command, packages_command


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def main() -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = argparse.ArgumentParser(
        description="Pkgdesc - Package Declaration and Build File Generation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    generate_parser = subparsers.add_parser(
        "generate",
        help="Resolve a package and generate its build manifest",
    )
    generate_parser.add_argument(
        "package",
        help="Name of a registered package",
    )
    generate_parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional generator configuration. Can be a path to a TOML/JSON "
            "file or an inline TOML/JSON string. When omitted, built-in "
            "defaults are used."
        ),
    )
    generate_parser.add_argument(
        "-o",
        "--output",
        help="Output root directory (overrides the configuration)",
    )

    order_parser = subparsers.add_parser(
        "order",
        help="Print the build order of a package's projects",
    )
    order_parser.add_argument(
        "package",
        help="Name of a registered package",
    )

    subparsers.add_parser(
        "packages",
        help="List registered packages",
    )

    args = parser.parse_args()

    setup_logging(args.verbose)

    if args.command == "generate":
        return generate_command(args)
    elif args.command == "order":
        return order_command(args)
    elif args.command == "packages":
        return packages_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
