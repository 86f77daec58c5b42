"""CLI application entry point and command routing for aoc2019.

This module is the **sole error boundary** for the entire application.
It catches :class:`~aoc2019.exceptions.Aoc2019Error`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core and
  infrastructure layers.
* Answers are printed to stdout; everything else goes to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.markup import escape

from aoc2019.cli import exit_codes
from aoc2019.cli.console import console
from aoc2019.core.models import Ship
from aoc2019.exceptions import Aoc2019Error, InputLoadError
from aoc2019.infra.int_lines import read_int_lines
from aoc2019.version import __version__

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Supported invocations:
    * ``aoc2019 fuel <file> [--part2]``
    * ``aoc2019 --part2 fuel <file>``  — ``--part2`` is also global
    * ``aoc2019 --version``
    """
    parser = argparse.ArgumentParser(
        prog="aoc2019",
        description="Advent of Code 2019 solvers.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log diagnostic messages to stderr.",
    )
    parser.add_argument(
        "--part2",
        action="store_true",
        help="Run the second part of the solution.",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    fuel_parser = subparsers.add_parser(
        "fuel",
        help="Calculate fuel",
        description="Calculate the fuel necessary to launch the ship.",
    )
    fuel_parser.add_argument(
        "file",
        type=Path,
        help="Input file with one module mass per line.",
    )
    # SUPPRESS keeps a global ``--part2`` from being reset by the subparser.
    fuel_parser.add_argument(
        "--part2",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Include the fuel needed to carry the fuel itself.",
    )
    fuel_parser.set_defaults(handler=_handle_fuel)

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(format=_LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("aoc2019").setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_fuel(args: argparse.Namespace) -> int:
    """Sum the fuel requirement of every module listed in ``args.file``.

    Flow:
    1. Read module masses (raises :class:`InputLoadError` on bad input).
    2. Build the :class:`Ship`.
    3. Print the simple or compound total depending on ``--part2``.
    """
    masses = read_int_lines(args.file)
    ship = Ship.from_masses(masses)

    if args.part2:
        total = ship.total_compound_fuel()
    else:
        total = ship.total_fuel()
    logger.debug(
        "%d modules, part2=%s, total=%d", len(ship), args.part2, total,
    )

    print(f"Fuel needed: {total}")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the aoc2019 CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command is None:
        print("Please supply a subcommand.")
        parser.print_help()
        return exit_codes.SUCCESS

    return args.handler(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def _report(prefix: str, exc: Aoc2019Error) -> None:
    console.print(f"[bold red]{prefix}[/bold red] {escape(str(exc))}")
    if exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")


def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except InputLoadError as exc:
        _report("Error loading file:", exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except Aoc2019Error as exc:
        _report("Error:", exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
