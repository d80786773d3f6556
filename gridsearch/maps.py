"""
Map loading for JSON-defined occupancy grids.

This module provides MapLoader for turning JSON map files into an
EnvironmentGrid plus optional start/goal cells, so demos and tests can share
level layouts without building grids in code.

Map file structure:
```json
{
  "name": "Corridor",
  "description": "Two rooms joined by a single gap",
  "rows": [
    "S..#....",
    "...#....",
    "........",
    "...#...G"
  ],
  "blocked": "#",
  "heuristic": "manhattan"
}
```

Rows are read as ``rows[y][x]``. ``S`` and ``G`` mark the start and goal on
open floor; explicit ``start``/``goal`` keys take precedence over markers.

Usage:
    loader = MapLoader()
    definition = loader.load("corridor")
    edges = search(definition.to_grid(), definition.start, definition.goal)
"""

import json
from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError

from .config import Config
from .environment import Cell, EnvironmentGrid

START_MARKER = "S"
GOAL_MARKER = "G"


class MapDefinition(BaseModel):
    """Validated contents of a map file."""

    name: str
    description: str = ""
    rows: List[str] = Field(..., min_length=1, description="ASCII rows, rows[y][x]")
    blocked: str = Field("#", min_length=1, description="Characters that mark blocked cells")
    start: Optional[Tuple[int, int]] = None
    goal: Optional[Tuple[int, int]] = None
    heuristic: Optional[str] = Field(None, description="Preferred heuristic name for this map")

    def to_grid(self) -> EnvironmentGrid:
        return EnvironmentGrid.from_rows(self.rows, blocked=self.blocked)

    def find_marker(self, marker: str) -> Optional[Cell]:
        for y, row in enumerate(self.rows):
            x = row.find(marker)
            if x != -1:
                return (x, y)
        return None


class MapLoader:
    """Load and validate occupancy maps from JSON files.

    Directory structure:
    - Default: ``Config.MAPS_DIR`` ({PROJECT_ROOT}/examples/maps unless overridden)
    - Override via constructor: MapLoader(Path("/custom/maps"))
    - Map files: {map_name}.json (e.g., "corridor.json")
    """

    def __init__(self, maps_dir: Optional[Path] = None):
        self.maps_dir = maps_dir or Config.MAPS_DIR

    def load(self, map_name: str) -> MapDefinition:
        """Load a map by name from JSON file.

        Args:
            map_name: Name of map (without .json extension)

        Returns:
            MapDefinition with start/goal resolved from keys or S/G markers

        Raises:
            FileNotFoundError: If map file doesn't exist in maps_dir
            ValueError: If the JSON is malformed or fails validation
        """
        map_path = self.maps_dir / f"{map_name}.json"

        if not map_path.exists():
            raise FileNotFoundError(f"Map '{map_name}' not found at {map_path}")

        try:
            data = json.loads(map_path.read_text())
        except json.JSONDecodeError as exc:
            raise ValueError(f"Map '{map_name}' is not valid JSON: {exc}") from exc

        return self.parse(data, source=map_name)

    def parse(self, data: dict, *, source: str = "<memory>") -> MapDefinition:
        """Validate raw map data and resolve start/goal markers."""
        if not isinstance(data, dict):
            raise ValueError(f"Map '{source}' must be a JSON object")

        try:
            definition = MapDefinition.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Map '{source}' failed validation: {exc}") from exc

        updates = {}
        if definition.start is None:
            updates["start"] = definition.find_marker(START_MARKER)
        if definition.goal is None:
            updates["goal"] = definition.find_marker(GOAL_MARKER)
        if updates:
            definition = definition.model_copy(update=updates)

        grid = definition.to_grid()
        for label, cell in (("start", definition.start), ("goal", definition.goal)):
            if cell is not None and not grid.in_bounds(cell):
                raise ValueError(
                    f"Map '{source}' {label} {cell} lies outside the "
                    f"{grid.width}x{grid.height} grid"
                )

        return definition

    def list_maps(self) -> List[str]:
        """Return the names of all map files in maps_dir."""
        if not self.maps_dir.exists():
            return []
        return sorted(path.stem for path in self.maps_dir.glob("*.json"))
