"""Tests for occupancy grids and grid helper utilities."""

from gridsearch import Edge
from gridsearch.environment import (
    EnvironmentGrid,
    EnvironmentGridState,
    GridTile,
    GridTileState,
    grid_shortest_path,
    is_valid_path,
    path_cells,
    validate_grid_move,
)


def test_grid_out_of_bounds_is_blocked():
    grid = EnvironmentGrid(width=3, height=2)

    assert grid.is_passable((0, 0)) is True
    assert grid.is_passable((2, 1)) is True
    assert grid.is_passable((3, 0)) is False
    assert grid.is_passable((0, 2)) is False
    assert grid.is_passable((-1, 0)) is False


def test_grid_from_rows():
    grid = EnvironmentGrid.from_rows(
        [
            "S.#",
            ".#.",
            "..",  # ragged row: missing (2, 2) counts as blocked
        ]
    )

    assert (grid.width, grid.height) == (3, 3)
    assert grid.is_passable((0, 0)) is True  # markers are open floor
    assert grid.is_passable((2, 0)) is False
    assert grid.is_passable((1, 1)) is False
    assert grid.is_passable((2, 2)) is False
    assert sorted(grid.blocked_cells()) == [(1, 1), (2, 0), (2, 2)]


def test_grid_from_rows_custom_blocked_symbols():
    grid = EnvironmentGrid.from_rows([".X~", "..."], blocked="X~")

    assert grid.is_passable((1, 0)) is False
    assert grid.is_passable((2, 0)) is False
    assert grid.is_passable((0, 1)) is True


def test_grid_from_decoration_matrix():
    # matrix[x][y]; code 0 is floor, 1 wall, 7 a spawned item
    matrix = [
        [0, 0, 1],
        [0, 7, 0],
    ]

    grid = EnvironmentGrid.from_matrix(matrix)

    assert (grid.width, grid.height) == (2, 3)
    assert grid.is_passable((0, 0)) is True
    assert grid.is_passable((0, 2)) is False
    assert grid.is_passable((1, 1)) is False
    assert grid.get_tile((1, 1)).game_object == "7"

    # Items can be declared walkable
    walkable_items = EnvironmentGrid.from_matrix(matrix, passable_values={0, 7})
    assert walkable_items.is_passable((1, 1)) is True


def test_grid_shortest_path():
    grid = EnvironmentGrid(
        width=4,
        height=4,
        tiles={
            (1, 1): GridTile(collision=True),
            (2, 1): GridTile(collision=True),
        },
    )

    path = grid_shortest_path(grid, (0, 0), (3, 2))
    assert path is not None
    assert path[0] == (0, 0)
    assert path[-1] == (3, 2)
    assert (1, 1) not in path and (2, 1) not in path
    assert len(path) == 6


def test_grid_shortest_path_blocked_endpoint():
    grid = EnvironmentGrid(width=3, height=3, tiles={(2, 2): GridTile(collision=True)})

    assert grid_shortest_path(grid, (0, 0), (2, 2)) is None
    assert grid_shortest_path(grid, (1, 1), (1, 1)) == [(1, 1)]


def test_path_cells_and_validity():
    grid = EnvironmentGrid(width=3, height=3, tiles={(1, 1): GridTile(collision=True)})
    edges = [
        Edge(from_cell=(0, 0), to_cell=(1, 0)),
        Edge(from_cell=(1, 0), to_cell=(2, 0)),
        Edge(from_cell=(2, 0), to_cell=(2, 1)),
    ]

    assert path_cells(edges, (0, 0)) == [(0, 0), (1, 0), (2, 0), (2, 1)]
    assert is_valid_path(grid, edges, (0, 0), (2, 1)) is True
    # Wrong goal
    assert is_valid_path(grid, edges, (0, 0), (2, 2)) is False
    # Empty path only valid in place
    assert is_valid_path(grid, [], (0, 0), (0, 0)) is True
    assert is_valid_path(grid, [], (0, 0), (1, 0)) is False


def test_is_valid_path_rejects_broken_sequences():
    grid = EnvironmentGrid(width=3, height=3, tiles={(1, 1): GridTile(collision=True)})

    gap = [
        Edge(from_cell=(0, 0), to_cell=(1, 0)),
        Edge(from_cell=(2, 0), to_cell=(2, 1)),
    ]
    jump = [Edge(from_cell=(0, 0), to_cell=(2, 0))]
    through_wall = [
        Edge(from_cell=(0, 1), to_cell=(1, 1)),
        Edge(from_cell=(1, 1), to_cell=(2, 1)),
    ]

    assert is_valid_path(grid, gap, (0, 0), (2, 1)) is False
    assert is_valid_path(grid, jump, (0, 0), (2, 0)) is False
    assert is_valid_path(grid, through_wall, (0, 1), (2, 1)) is False


def test_validate_grid_move():
    # Create a 5x5 grid with wall at (2,2) blocking direct paths
    grid = EnvironmentGrid(
        width=5,
        height=5,
        tiles={
            (2, 2): GridTile(collision=True),  # wall in center
        },
    )

    # Valid move: adjacent cell, passable
    assert validate_grid_move(grid, (1, 1), (1, 2)) is True

    # Invalid: target has collision
    assert validate_grid_move(grid, (1, 1), (2, 2)) is False

    # Invalid: out of bounds
    assert validate_grid_move(grid, (1, 1), (10, 10)) is False

    # Valid path exists going around obstacle
    assert validate_grid_move(grid, (1, 2), (3, 2)) is True

    # Invalid: max_distance constraint violated (path needs 8 steps)
    assert validate_grid_move(grid, (0, 0), (4, 4), max_distance=4) is False
    # Same path allowed without distance constraint
    assert validate_grid_move(grid, (0, 0), (4, 4)) is True
    # Lists are accepted as positions
    assert validate_grid_move(grid, [0, 0], [0, 1], max_distance=1) is True


def test_grid_state_round_trip():
    grid_state = EnvironmentGridState(
        width=4,
        height=3,
        tiles={
            (0, 0): GridTileState(game_object="wall", collision=True),
            (1, 1): GridTileState(game_object="crate", collision=False, metadata={"id": "c1"}),
        },
    )

    grid = grid_state.to_grid()
    assert grid.is_passable((0, 0)) is False
    assert grid.is_passable((1, 1)) is True
    assert grid.get_tile((1, 1)).metadata == {"id": "c1"}

    restored = EnvironmentGridState.from_grid(grid)
    assert restored == grid_state
