"""Occupancy grids consumed by the search.

The search itself only needs ``is_passable(cell)``. ``EnvironmentGrid`` is the
stock implementation: a bounded, sparse tile map where anything outside
``width`` x ``height`` counts as blocked, so the search never has to check
bounds itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Container, Dict, Iterable, Protocol, Sequence, Tuple

# (x, y) integer cell coordinates
Cell = Tuple[int, int]


class OccupancyGrid(Protocol):
    """Anything that can answer passability for arbitrary integer cells."""

    def is_passable(self, cell: Cell) -> bool:
        ...


@dataclass
class GridTile:
    """Metadata about a single tile in the environment grid."""

    game_object: str | None = None
    collision: bool = False
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass
class EnvironmentGrid:
    """Bounded 2D grid with sparse tile metadata."""

    width: int
    height: int
    tiles: Dict[Cell, GridTile] = field(default_factory=dict)

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def get_tile(self, cell: Cell) -> GridTile | None:
        return self.tiles.get(cell)

    def is_passable(self, cell: Cell) -> bool:
        if not self.in_bounds(cell):
            return False
        tile = self.get_tile(cell)
        if tile is None:
            return True  # missing tiles are open floor
        return not tile.collision

    def blocked_cells(self) -> Iterable[Cell]:
        return (cell for cell, tile in self.tiles.items() if tile.collision)

    @classmethod
    def from_rows(cls, rows: Sequence[str], *, blocked: str = "#") -> "EnvironmentGrid":
        """Build a grid from ASCII rows, ``rows[y][x]``.

        Characters in ``blocked`` become collision tiles; everything else is
        open. Rows shorter than the widest row are padded with blocked cells so
        ragged maps never leak open space past their visible edge.
        """
        width = max((len(row) for row in rows), default=0)
        tiles: Dict[Cell, GridTile] = {}
        for y, row in enumerate(rows):
            for x in range(width):
                char = row[x] if x < len(row) else None
                if char is None or char in blocked:
                    tiles[(x, y)] = GridTile(game_object="wall", collision=True)
        return cls(width=width, height=len(rows), tiles=tiles)

    @classmethod
    def from_matrix(
        cls,
        matrix: Sequence[Sequence[int]],
        *,
        passable_values: Container[int] = (0,),
    ) -> "EnvironmentGrid":
        """Build a grid from a decoration-coded level matrix, ``matrix[x][y]``.

        Level generators write one decoration code per cell; only codes in
        ``passable_values`` (floor) can be walked on. Anything else (walls,
        spawned items, enemies) is treated as a collision tile.
        """
        width = len(matrix)
        height = max((len(column) for column in matrix), default=0)
        tiles: Dict[Cell, GridTile] = {}
        for x, column in enumerate(matrix):
            for y in range(height):
                if y >= len(column) or column[y] not in passable_values:
                    code = column[y] if y < len(column) else None
                    tiles[(x, y)] = GridTile(
                        game_object=None if code is None else str(code),
                        collision=True,
                    )
        return cls(width=width, height=height, tiles=tiles)
