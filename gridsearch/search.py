"""
A* search over 4-connected occupancy grids.

The search keeps exactly one ``NodeRecord`` per discovered cell, split between
a heap-ordered frontier (open set) and a visited map (closed set). Records are
updated in place when a cheaper route shows up, including records that were
already finalized: those are reopened into the frontier, which keeps results
correct for heuristics that are admissible but not consistent.

Path reconstruction follows origin cells stored on each edge back to the start.
No record ever points at another record, so nothing aliases mutable search
state once the result is returned.

Usage:
    grid = EnvironmentGrid.from_rows(["...", ".#.", "..."])
    edges = search(grid, (0, 0), (2, 2), ManhattanDistance((2, 2)))
    if edges is None:
        ...  # no path
"""

from __future__ import annotations

import heapq
import itertools
import numbers
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple, Union

from .config import Config
from .environment.grid import Cell, OccupancyGrid
from .heuristics import Heuristic, build_heuristic
from .logging_utils import log_deterministic, log_error, log_success
from .schemas import UNIT_MOVE_COST, Edge, SearchStats, path_cost

# Expansion order: +x, -x, +y, -y. Affects which of several equal-cost paths wins.
NEIGHBOR_OFFSETS: Tuple[Cell, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))

HeuristicLike = Union[Heuristic, Callable[[Cell], float]]


class InvalidSearchInput(ValueError):
    """Raised when start/end are not integer cell coordinates at all.

    Integer cells outside the grid are fine: the grid reports them blocked and
    the search answers "no path".
    """


@dataclass
class NodeRecord:
    """Search state for one cell."""

    location: Cell
    connection: Optional[Edge]
    cost_so_far: float
    estimated_total_cost: float

    @property
    def heuristic_value(self) -> float:
        """Heuristic part of the estimate.

        Derived from the two cost fields, so read it before changing
        ``cost_so_far``; the search caches it first when updating a record.
        """
        return self.estimated_total_cost - self.cost_so_far


class Frontier:
    """Open set keyed by cell, with heap-ordered minimum selection.

    Updating a record pushes a fresh heap entry and invalidates the old one by
    sequence number, so a cell appears at most once in the logical frontier no
    matter how often its cost improves. Ties on estimated total cost go to the
    record inserted or updated first.
    """

    def __init__(self) -> None:
        self._records: Dict[Cell, NodeRecord] = {}
        self._live_entry: Dict[Cell, int] = {}
        self._heap: List[Tuple[float, int, Cell]] = []
        self._sequence = itertools.count()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, cell: object) -> bool:
        return cell in self._records

    def __iter__(self) -> Iterator[NodeRecord]:
        return iter(self._records.values())

    def get(self, cell: Cell) -> Optional[NodeRecord]:
        return self._records.get(cell)

    def push(self, record: NodeRecord) -> None:
        """Insert ``record`` or re-prioritize it if its cell is already present."""
        entry = next(self._sequence)
        self._records[record.location] = record
        self._live_entry[record.location] = entry
        heapq.heappush(self._heap, (record.estimated_total_cost, entry, record.location))

    def peek(self) -> NodeRecord:
        """Return the record with the smallest estimated total cost without removing it."""
        while self._heap:
            _, entry, cell = self._heap[0]
            if self._live_entry.get(cell) == entry:
                return self._records[cell]
            # Superseded by an update or already removed
            heapq.heappop(self._heap)
        raise IndexError("peek from an empty frontier")

    def remove(self, cell: Cell) -> NodeRecord:
        """Drop ``cell`` from the frontier; its heap entry goes stale."""
        del self._live_entry[cell]
        return self._records.pop(cell)


def _as_cell(name: str, value: object) -> Cell:
    """Normalize ``value`` to an ``(x, y)`` tuple of ints or raise InvalidSearchInput."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence) or len(value) != 2:
        raise InvalidSearchInput(f"{name} must be an (x, y) pair of integers, got {value!r}")
    x, y = value
    for coord in (x, y):
        # bool is an int subclass but never a meaningful coordinate
        if isinstance(coord, bool) or not isinstance(coord, numbers.Integral):
            raise InvalidSearchInput(f"{name} must be an (x, y) pair of integers, got {value!r}")
    # Plain ints so the cell hashes like any other tuple key
    return (int(x), int(y))


class GridSearch:
    """One A* query: a grid, a start cell, an end cell and a heuristic.

    ``search()`` may be called more than once; every call rebuilds its own
    frontier and visited maps and refreshes ``stats``. The grid is only read.

    Args:
        grid: Object exposing ``is_passable(cell)``; out-of-bounds cells must be blocked
        start: Cell the path starts from
        end: Cell the path must reach
        heuristic: Estimator bound to ``end``. Defaults to ``Config.HEURISTIC``
        max_steps: Expansion budget. Defaults to ``Config.MAX_STEPS`` (unbounded when unset)
        verbose: Print a summary line per search. Defaults to ``Config.VERBOSE``
    """

    def __init__(
        self,
        grid: OccupancyGrid,
        start: Cell,
        end: Cell,
        heuristic: Optional[HeuristicLike] = None,
        *,
        max_steps: Optional[int] = None,
        verbose: Optional[bool] = None,
    ):
        self.grid = grid
        self.start = _as_cell("start", start)
        self.end = _as_cell("end", end)
        self.heuristic = heuristic if heuristic is not None else build_heuristic(Config.HEURISTIC, self.end)
        self.max_steps = max_steps if max_steps is not None else Config.MAX_STEPS
        if self.max_steps is not None and self.max_steps <= 0:
            raise ValueError(f"max_steps must be positive, got {self.max_steps}")
        self.verbose = Config.VERBOSE if verbose is None else verbose
        self.stats = SearchStats()

    def _estimate(self, cell: Cell) -> float:
        estimate = getattr(self.heuristic, "estimate", self.heuristic)
        return float(estimate(cell))

    def _connections(self, record: NodeRecord) -> Iterator[Edge]:
        """Yield edges to the passable axis-aligned neighbors of ``record``."""
        x, y = record.location
        for dx, dy in NEIGHBOR_OFFSETS:
            neighbor = (x + dx, y + dy)
            if self.grid.is_passable(neighbor):
                yield Edge(from_cell=record.location, to_cell=neighbor, cost=UNIT_MOVE_COST)

    def search(self) -> Optional[List[Edge]]:
        """Run A* and return the edges from start to end, or None when unreachable.

        An empty list means start already equals end. Blocked endpoints are
        never reachable, including when start equals end.
        """
        self.stats = SearchStats()

        if self.verbose:
            log_deterministic(
                f"[GridSearch] Searching {self.start} → {self.end} with {self.heuristic!r}"
            )

        if not (self.grid.is_passable(self.start) and self.grid.is_passable(self.end)):
            return self._fail("endpoint_blocked")

        frontier = Frontier()
        visited: Dict[Cell, NodeRecord] = {}

        frontier.push(
            NodeRecord(
                location=self.start,
                connection=None,
                cost_so_far=0.0,
                estimated_total_cost=self._estimate(self.start),
            )
        )
        self.stats.discovered = 1

        goal_record: Optional[NodeRecord] = None
        while frontier:
            current = frontier.peek()

            if current.location == self.end:
                goal_record = current
                break

            if self.max_steps is not None and self.stats.expanded >= self.max_steps:
                return self._fail("max_steps_exhausted")

            for edge in self._connections(current):
                end_cell = edge.to_cell
                end_cost = current.cost_so_far + edge.cost

                closed = visited.get(end_cell)
                open_record = frontier.get(end_cell)
                if closed is not None:
                    if closed.cost_so_far <= end_cost:
                        continue
                    # Cheaper route to a finalized cell: reopen it
                    del visited[end_cell]
                    self.stats.reopened += 1
                    end_record = closed
                    end_heuristic = closed.heuristic_value
                elif open_record is not None:
                    if open_record.cost_so_far <= end_cost:
                        continue
                    end_record = open_record
                    end_heuristic = open_record.heuristic_value
                else:
                    end_heuristic = self._estimate(end_cell)
                    end_record = NodeRecord(
                        location=end_cell,
                        connection=None,
                        cost_so_far=end_cost,
                        estimated_total_cost=end_cost + end_heuristic,
                    )
                    self.stats.discovered += 1

                end_record.cost_so_far = end_cost
                end_record.connection = edge
                end_record.estimated_total_cost = end_cost + end_heuristic
                frontier.push(end_record)

            frontier.remove(current.location)
            visited[current.location] = current
            self.stats.expanded += 1

        if goal_record is None:
            return self._fail("no_path_found")

        edges = self._reconstruct(goal_record, frontier, visited)
        self.stats.found = True
        self.stats.path_cost = path_cost(edges)
        if self.verbose:
            log_success(
                f"[GridSearch] Path found: {len(edges)} moves, cost {self.stats.path_cost:g} "
                f"(expanded={self.stats.expanded}, reopened={self.stats.reopened})"
            )
        return edges

    def _reconstruct(
        self,
        goal_record: NodeRecord,
        frontier: Frontier,
        visited: Dict[Cell, NodeRecord],
    ) -> List[Edge]:
        edges: List[Edge] = []
        current = goal_record
        while current.location != self.start:
            edge = current.connection
            if edge is None:
                # Only the start record lacks a connection
                raise RuntimeError(f"record for {current.location} has no incoming edge")
            edges.append(edge)
            origin = edge.from_cell
            current = frontier.get(origin) or visited[origin]
        edges.reverse()
        return edges

    def _fail(self, reason: str) -> None:
        self.stats.found = False
        self.stats.reason = reason
        if self.verbose:
            log_error(
                f"[GridSearch] No path {self.start} → {self.end}: {reason} "
                f"(expanded={self.stats.expanded})"
            )
        return None


def search(
    grid: OccupancyGrid,
    start: Cell,
    end: Cell,
    heuristic: Optional[HeuristicLike] = None,
    *,
    max_steps: Optional[int] = None,
) -> Optional[List[Edge]]:
    """Find a minimum-cost path of edges from ``start`` to ``end``.

    Returns ``[]`` when start equals end, ``None`` when no path exists.
    See ``GridSearch`` for argument details and search statistics.
    """
    return GridSearch(grid, start, end, heuristic, max_steps=max_steps).search()
