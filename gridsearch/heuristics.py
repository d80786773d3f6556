"""
Heuristic interface and concrete cost estimators for grid search.

A heuristic is bound to one goal cell when constructed and then answers
``estimate(cell)``: a non-negative guess at the remaining cost from ``cell``
to that goal. The search only relies on estimates being deterministic;
admissibility (never overestimating) is what buys optimal paths, and it is
the caller's choice of heuristic that provides it.
"""

import math
from abc import ABC, abstractmethod
from typing import Callable, Dict

from .environment.grid import Cell


class Heuristic(ABC):
    """Abstract cost-to-goal estimator bound to a fixed goal cell.

    Subclasses implement ``estimate``. Keep it a pure function of the cell:
    the frontier ordering inside a single search run assumes the same cell
    always gets the same value.
    """

    def __init__(self, goal: Cell):
        self.goal = goal

    @abstractmethod
    def estimate(self, cell: Cell) -> float:
        """Return a non-negative estimate of the cost from ``cell`` to the goal."""

    def __call__(self, cell: Cell) -> float:
        return self.estimate(cell)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(goal={self.goal})"


class ManhattanDistance(Heuristic):
    """``|dx| + |dy|``. Exact on an open 4-connected grid, so admissible and consistent."""

    def estimate(self, cell: Cell) -> float:
        return float(abs(cell[0] - self.goal[0]) + abs(cell[1] - self.goal[1]))


class ZeroHeuristic(Heuristic):
    """Always 0. Turns A* into uniform-cost search (Dijkstra)."""

    def estimate(self, cell: Cell) -> float:
        return 0.0


class EuclideanDistance(Heuristic):
    """Straight-line distance. Admissible but weaker than Manhattan on 4-connected grids."""

    def estimate(self, cell: Cell) -> float:
        return math.hypot(cell[0] - self.goal[0], cell[1] - self.goal[1])


class CoordinateSum(Heuristic):
    """Legacy estimate ``x + goal_x + y + goal_y``.

    Kept for behavioural parity with level maps tuned against it. It is not a
    distance: it never subtracts, overestimates freely, and can steer the
    search to non-optimal paths. Negative sums clamp to 0.
    """

    def estimate(self, cell: Cell) -> float:
        return float(max(cell[0] + self.goal[0] + cell[1] + self.goal[1], 0))


# Name -> factory taking the goal cell. Used by Config and the demo scripts.
HEURISTICS: Dict[str, Callable[[Cell], Heuristic]] = {
    "manhattan": ManhattanDistance,
    "zero": ZeroHeuristic,
    "euclidean": EuclideanDistance,
    "coordinate_sum": CoordinateSum,
}


def build_heuristic(name: str, goal: Cell) -> Heuristic:
    """Instantiate a registered heuristic by name, bound to ``goal``.

    Raises:
        ValueError: If ``name`` is not a registered heuristic
    """
    try:
        factory = HEURISTICS[name]
    except KeyError:
        raise ValueError(
            f"Unknown heuristic '{name}'. Available: {', '.join(sorted(HEURISTICS))}"
        ) from None
    return factory(goal)
