"""aoc2019 — Advent of Code 2019 solvers.

Currently ships the day 1 rocket-equation fuel calculator, built with
the same layered core / infra / cli architecture as every later day.
"""

from aoc2019.version import __version__

__all__: list[str] = ["__version__"]
