"""Domain models for aoc2019.

All models are **frozen** dataclasses — immutable value objects whose
behaviour is limited to delegating to the pure formulas in
:mod:`aoc2019.core.fuel`.  They carry zero I/O and zero dependencies on
external packages.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from aoc2019.core.fuel import compound_fuel, fuel


# ---------------------------------------------------------------------------
# Single module
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Module:
    """One spacecraft module, identified only by its mass."""

    mass: int
    """Module mass.  Negative values are accepted and need no fuel."""

    def fuel(self) -> int:
        return fuel(self.mass)

    def compound_fuel(self) -> int:
        return compound_fuel(self.mass)


# ---------------------------------------------------------------------------
# Typed collection wrapper
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Ship:
    """Immutable, ordered collection of :class:`Module` entries.

    The tuple guarantees immutability.  Both totals are plain sums, so
    they are idempotent and independent of module order.
    """

    modules: tuple[Module, ...]

    @classmethod
    def from_masses(cls, masses: Iterable[int]) -> Ship:
        """Build a ship holding one module per mass, in input order."""
        return cls(modules=tuple(Module(mass=mass) for mass in masses))

    def total_fuel(self) -> int:
        """Sum of the simple fuel requirement of every module."""
        return sum(module.fuel() for module in self.modules)

    def total_compound_fuel(self) -> int:
        """Sum of the compound fuel requirement of every module."""
        return sum(module.compound_fuel() for module in self.modules)

    def __len__(self) -> int:
        return len(self.modules)

    def __bool__(self) -> bool:
        return len(self.modules) > 0
