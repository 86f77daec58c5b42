"""Allow ``python -m aoc2019`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m aoc2019`` behaves identically to the ``aoc2019`` console
script.
"""

from __future__ import annotations

from aoc2019.cli.app import cli

if __name__ == "__main__":
    cli()
