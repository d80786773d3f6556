"""Utilities for occupancy grids and the paths computed on them."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence, Tuple

from .grid import Cell, OccupancyGrid

if TYPE_CHECKING:
    from ..schemas import Edge


def grid_shortest_path(grid: OccupancyGrid, start: Cell, goal: Cell) -> Optional[List[Cell]]:
    """Return a path of (x, y) cells avoiding blocked cells.

    Uses BFS to find shortest path on 2D grid with obstacles. Only explores passable
    cells. Returns None if goal unreachable or either endpoint is blocked. Path includes
    start and goal. Serves as the uninformed reference the A* search is checked against.
    """

    # Blocked endpoints are unreachable, matching the A* search
    if not (grid.is_passable(start) and grid.is_passable(goal)):
        return None

    # Trivial case: already at goal
    if start == goal:
        return [start]

    # Four-directional movement, same order as the A* expansion.
    directions = [(1, 0), (-1, 0), (0, 1), (0, -1)]
    visited = {start}
    queue: deque[Tuple[Cell, List[Cell]]] = deque([(start, [start])])

    def neighbors(cell: Cell) -> Iterable[Cell]:
        """Generate passable neighbor cells. The grid handles bounds."""
        x, y = cell
        for dx, dy in directions:
            nb = (x + dx, y + dy)
            if grid.is_passable(nb):
                yield nb

    while queue:
        # Process cells in FIFO order (BFS). First path to reach goal is shortest.
        cell, path = queue.popleft()
        for nb in neighbors(cell):
            # Skip visited cells to avoid cycles
            if nb in visited:
                continue
            visited.add(nb)
            new_path = path + [nb]
            # Goal reached - return path immediately
            if nb == goal:
                return new_path
            queue.append((nb, new_path))
    # No path exists - goal blocked off or disconnected
    return None


def path_cells(edges: Sequence["Edge"], start: Cell) -> List[Cell]:
    """Expand an edge sequence into the cells it visits, start included."""
    cells = [start]
    cells.extend(edge.to_cell for edge in edges)
    return cells


def is_valid_path(grid: OccupancyGrid, edges: Sequence["Edge"], start: Cell, goal: Cell) -> bool:
    """Check that ``edges`` walk contiguously from start to goal over passable cells.

    Every edge must be a single axis-aligned step, each edge must begin where the
    previous one ended, and every cell touched must be passable. An empty edge
    sequence is valid only when start equals goal.
    """
    if not grid.is_passable(start):
        return False

    position = start
    for edge in edges:
        if edge.from_cell != position:
            return False
        dx = abs(edge.to_cell[0] - edge.from_cell[0])
        dy = abs(edge.to_cell[1] - edge.from_cell[1])
        if dx + dy != 1:
            return False
        if not grid.is_passable(edge.to_cell):
            return False
        position = edge.to_cell

    return position == goal


def validate_grid_move(
    grid: OccupancyGrid,
    current_pos: Cell | List[int],
    target_pos: Cell | List[int],
    *,
    max_distance: Optional[int] = None,
) -> bool:
    """Validate whether an agent can move from current_pos to target_pos on the grid.

    Checks:
    1. Target position is passable (the grid reports out-of-bounds as blocked)
    2. A path exists from current to target, found with A* and Manhattan distance
    3. Optional: path length <= max_distance

    Args:
        grid: Occupancy grid to move on
        current_pos: Agent's current (x, y) position (tuple or list)
        target_pos: Desired (x, y) destination (tuple or list)
        max_distance: Optional maximum number of moves

    Returns:
        True if move is valid and reachable, False otherwise
    """
    # Imported here: the search module depends on this package
    from ..heuristics import ManhattanDistance
    from ..search import GridSearch

    # Normalize to tuples for consistent hashing
    current = tuple(current_pos) if isinstance(current_pos, list) else current_pos
    target = tuple(target_pos) if isinstance(target_pos, list) else target_pos

    if not grid.is_passable(target):
        return False

    edges = GridSearch(grid, current, target, ManhattanDistance(target), verbose=False).search()
    if edges is None:
        return False  # no valid path exists (blocked by walls/obstacles)

    if max_distance is not None and len(edges) > max_distance:
        return False  # path exists but too far for a single action

    return True
