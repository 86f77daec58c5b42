"""Core layer — pure formulas and domain models.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from aoc2019.core.fuel import compound_fuel, fuel, fuel_increments
from aoc2019.core.models import Module, Ship

__all__: list[str] = [
    "Module",
    "Ship",
    "compound_fuel",
    "fuel",
    "fuel_increments",
]
