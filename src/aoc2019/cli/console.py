"""CLI console helpers built on Rich.

Diagnostics and error messages go to stderr through Rich; puzzle
answers are written to stdout by the command handlers so that they
stay machine-readable.
"""

from __future__ import annotations

from rich.console import Console


def get_rich_console() -> Console:
    """Create a Rich console targeting the *current* ``sys.stderr``.

    Soft wrapping keeps long file paths on a single line.
    """
    return Console(stderr=True, soft_wrap=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy resolving a fresh console per call.

    A fresh console honours stream redirection that happens after
    import (pytest's ``capsys``, ``contextlib.redirect_stderr``).
    """

    def print(self, *objects: object) -> None:
        get_rich_console().print(*objects)


console = _ConsoleProxy()

__all__: list[str] = ["console", "get_rich_console"]
