"""Pure rocket-equation fuel formulas.

Every function in this module is a **pure** transformation over
integers — no I/O, no side effects, total over its whole domain.

* :func:`fuel` — fuel for a single mass.
* :func:`fuel_increments` — each extra batch of fuel needed to lift the
  previous batch, until the requirement drops to zero.
* :func:`compound_fuel` — the sum of those increments.
"""

from __future__ import annotations

from collections.abc import Iterator


def fuel(mass: int) -> int:
    """Return the fuel required to launch *mass*.

    ``mass // 3 - 2``, clamped to zero so small (or negative) masses
    never yield negative fuel.
    """
    return max(mass // 3 - 2, 0)


def fuel_increments(mass: int) -> Iterator[int]:
    """Yield the fuel for *mass*, then the fuel for that fuel, and so on.

    Stops at the first zero requirement, which is not yielded.  Any
    value ``<= 8`` maps to zero and every positive value shrinks by more
    than two thirds per step, so the sequence has ``O(log mass)`` terms.
    """
    current = fuel(mass)
    while current > 0:
        yield current
        current = fuel(current)


def compound_fuel(mass: int) -> int:
    """Return the fuel for *mass* including the fuel to carry the fuel."""
    return sum(fuel_increments(mass))
