"""Pydantic schemas for occupancy grids.

These models mirror the lightweight dataclasses in ``grid.py`` but keep grid
snapshots serializable so a map can be stored next to the paths computed on it.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, Field

from .grid import EnvironmentGrid, GridTile


class GridTileState(BaseModel):
    """Encodes metadata about a grid tile."""

    game_object: Optional[str] = None
    collision: bool = False
    metadata: Dict[str, str] = Field(default_factory=dict)


class EnvironmentGridState(BaseModel):
    """Sparse representation of a 2D occupancy grid."""

    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)
    tiles: Dict[Tuple[int, int], GridTileState] = Field(
        default_factory=dict,
        description="Sparse map: (x, y) → tile metadata",
    )

    def to_grid(self) -> EnvironmentGrid:
        """Materialize the dataclass grid the search runs against."""
        return EnvironmentGrid(
            width=self.width,
            height=self.height,
            tiles={
                cell: GridTile(
                    game_object=tile.game_object,
                    collision=tile.collision,
                    metadata=dict(tile.metadata),
                )
                for cell, tile in self.tiles.items()
            },
        )

    @classmethod
    def from_grid(cls, grid: EnvironmentGrid) -> "EnvironmentGridState":
        return cls(
            width=grid.width,
            height=grid.height,
            tiles={
                cell: GridTileState(
                    game_object=tile.game_object,
                    collision=tile.collision,
                    metadata=dict(tile.metadata),
                )
                for cell, tile in grid.tiles.items()
            },
        )
