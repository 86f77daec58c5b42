"""Infrastructure: read a puzzle input file of one integer per line.

Rules
-----
* The whole file is read once, before any parsing.
* The first malformed line aborts the read — no partial results.
* ``OSError`` / ``UnicodeDecodeError`` are re-raised as
  :class:`FileUnreadableError`; bad lines as
  :class:`MalformedIntegerError`.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
import re
from os import PathLike
from pathlib import Path

from aoc2019.exceptions import FileUnreadableError, MalformedIntegerError

logger = logging.getLogger(__name__)

# Decimal digits with an optional sign.  ``int()`` alone would also
# accept underscores and non-ASCII digits.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def read_int_lines(path: str | PathLike[str]) -> list[int]:
    """Return the integers in *path*, one per line, in file order.

    Surrounding whitespace on the file and on each line is ignored, so a
    trailing newline or CRLF line endings are fine.  A blank file yields
    an empty list.

    Raises
    ------
    FileUnreadableError
        When the file is missing, unreadable, or not valid UTF-8.
    MalformedIntegerError
        When a line is not a decimal integer.
    """
    file_path = Path(path)
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise FileUnreadableError(f"open {file_path}: {reason}") from exc
    except UnicodeDecodeError as exc:
        raise FileUnreadableError(
            f"{file_path}: not a UTF-8 text file",
            hint="The input must be plain text with one integer per line.",
        ) from exc

    content = content.strip()
    if not content:
        logger.debug("%s is empty; no values read", file_path)
        return []

    values: list[int] = []
    for line_number, raw in enumerate(content.split("\n"), start=1):
        text = raw.strip()
        if not _INTEGER_RE.fullmatch(text):
            raise MalformedIntegerError(
                f"{file_path}:{line_number}: invalid integer {text!r}",
                line_number=line_number,
                text=text,
            )
        values.append(int(text))

    logger.debug("Read %d values from %s", len(values), file_path)
    return values
