"""Infrastructure layer — filesystem access.

Every raw I/O or parsing exception must be caught here and re-raised
as an :class:`~aoc2019.exceptions.Aoc2019Error` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from aoc2019.infra.int_lines import read_int_lines

__all__: list[str] = ["read_int_lines"]
