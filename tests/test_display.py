from helpers import EXPECTED_4X4

from orthomaze.display import render_ascii
from orthomaze.grid import Cell, Grid


def test_carved_grid_renders_expected_picture(carved_grid):
    assert render_ascii(carved_grid) == EXPECTED_4X4
    assert str(carved_grid) == EXPECTED_4X4


def test_rendering_is_deterministic(carved_grid):
    assert render_ascii(carved_grid) == render_ascii(carved_grid)
    assert render_ascii(carved_grid) == render_ascii(carved_grid.copy())


def test_enclosed_grid_draws_every_wall():
    assert render_ascii(Grid(2, 2)) == (
        " ___ \n"
        "|_|_|\n"
        "|_|_|\n"
    )


def test_output_has_height_plus_one_lines():
    text = render_ascii(Grid(5, 3))
    lines = text.splitlines()
    assert len(lines) == 4
    assert all(len(line) == 2 * 5 + 1 for line in lines)


def test_open_west_and_east_edges_render_blank():
    grid = Grid(2, 1)
    grid.carve_passage((0, 0), Cell.WEST)
    grid.carve_passage((1, 0), Cell.EAST)
    assert render_ascii(grid).splitlines()[1] == " _|_ "


def test_open_side_with_missing_floor_stays_blank():
    grid = Grid(2, 1)
    grid.carve_passage((0, 0), Cell.EAST)
    grid.carve_passage((1, 0), Cell.SOUTH)
    assert render_ascii(grid).splitlines()[1] == "|_  |"
