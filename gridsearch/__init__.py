"""
gridsearch - A* shortest paths over 4-connected occupancy grids.

Give it a grid that answers passability, a start cell, a goal cell and a
heuristic bound to the goal; get back the edges of a minimum-cost path, or
None when the goal cannot be reached.

No file I/O required. No global state during a search.
All collaborators (grid, heuristic) injected by the caller.
"""

__version__ = "0.1.0"

# Grids (collaborators the search reads from)
from .environment import (
    Cell,
    OccupancyGrid,
    EnvironmentGrid,
    GridTile,
    EnvironmentGridState,
    GridTileState,
    grid_shortest_path,
    path_cells,
    is_valid_path,
    validate_grid_move,
)

# Core search
from .search import GridSearch, NodeRecord, Frontier, InvalidSearchInput, search
from .heuristics import (
    Heuristic,
    ManhattanDistance,
    ZeroHeuristic,
    EuclideanDistance,
    CoordinateSum,
    HEURISTICS,
    build_heuristic,
)

# Result schemas
from .schemas import Edge, SearchStats, UNIT_MOVE_COST, path_cost

# Map loader helpers
from .maps import MapLoader, MapDefinition

__all__ = [
    # Core search
    "GridSearch",
    "NodeRecord",
    "Frontier",
    "InvalidSearchInput",
    "search",
    # Heuristics
    "Heuristic",
    "ManhattanDistance",
    "ZeroHeuristic",
    "EuclideanDistance",
    "CoordinateSum",
    "HEURISTICS",
    "build_heuristic",
    # Schemas
    "Edge",
    "SearchStats",
    "UNIT_MOVE_COST",
    "path_cost",
    # Grids
    "Cell",
    "OccupancyGrid",
    "EnvironmentGrid",
    "GridTile",
    "EnvironmentGridState",
    "GridTileState",
    "grid_shortest_path",
    "path_cells",
    "is_valid_path",
    "validate_grid_move",
    # Maps
    "MapLoader",
    "MapDefinition",
]
