"""
Pydantic schemas for gridsearch results.

Search results leave the search as plain, serializable models so callers can
persist or ship a path without holding on to any search-internal state.

Design Philosophy:
- Edges carry the origin cell, never a reference to a live search record
- Edges are frozen: a returned path cannot be mutated behind the caller's back
- Stats describe one search run and are rebuilt on every call
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from gridsearch.environment.grid import Cell


# ============================================================================
# Path Schemas
# ============================================================================

# Every move between adjacent cells costs the same; terrain weights are not modelled.
UNIT_MOVE_COST = 1.0


class Edge(BaseModel):
    """A directed move from one cell to an adjacent cell.

    ``from_cell`` doubles as the back-reference used for path reconstruction:
    the search looks the origin up by cell instead of following object links.
    """

    model_config = ConfigDict(frozen=True)

    from_cell: Cell = Field(..., description="Cell the move starts from")
    to_cell: Cell = Field(..., description="Adjacent cell the move ends on")
    cost: float = Field(UNIT_MOVE_COST, description="Cost of taking this move")


def path_cost(edges: List[Edge]) -> float:
    """Total cost of an edge sequence (0.0 for the empty path)."""
    return float(sum(edge.cost for edge in edges))


# ============================================================================
# Search Diagnostics
# ============================================================================


class SearchStats(BaseModel):
    """Counters and outcome for a single search invocation.

    ``reason`` is None on success and otherwise one of:
    - ``endpoint_blocked``: start or goal is not passable
    - ``no_path_found``: frontier exhausted without reaching the goal
    - ``max_steps_exhausted``: the expansion budget ran out first
    """

    found: bool = Field(False, description="Whether a path was returned")
    expanded: int = Field(0, description="Records moved from frontier to visited")
    discovered: int = Field(0, description="Distinct cells that received a record")
    reopened: int = Field(0, description="Visited records reopened by a cheaper route")
    path_cost: Optional[float] = Field(None, description="Cost of the returned path")
    reason: Optional[str] = Field(None, description="Why no path was returned")
