"""Custom exception hierarchy for aoc2019.

All exceptions that cross layer boundaries must inherit from
:class:`Aoc2019Error`.  Raw ``OSError`` / ``ValueError`` instances raised
while acquiring input must NEVER propagate beyond the infrastructure
layer — they are caught and re-raised as a typed subclass defined here.

Hierarchy
---------
Aoc2019Error
└── InputLoadError
    ├── FileUnreadableError
    └── MalformedIntegerError
"""

from __future__ import annotations


class Aoc2019Error(Exception):
    """Base exception for all aoc2019 errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input acquisition -----------------------------------------------------

class InputLoadError(Aoc2019Error):
    """Raised when a puzzle input file cannot be turned into values."""


class FileUnreadableError(InputLoadError):
    """Raised when the input file is missing, unreadable, or not text."""


class MalformedIntegerError(InputLoadError):
    """Raised when a line of the input file is not a decimal integer."""

    def __init__(
        self,
        message: str,
        *,
        line_number: int,
        text: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.line_number: int = line_number
        """1-based line number of the offending line."""
        self.text: str = text
        """The offending line, stripped of surrounding whitespace."""
