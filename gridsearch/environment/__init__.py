"""Occupancy grids and grid helpers for gridsearch."""

from .grid import Cell, EnvironmentGrid, GridTile, OccupancyGrid
from .schemas import EnvironmentGridState, GridTileState
from .helpers import (
    grid_shortest_path,
    path_cells,
    is_valid_path,
    validate_grid_move,
)

__all__ = [
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
]
