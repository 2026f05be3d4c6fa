from orthomaze.grid import Cell, Grid

EXPECTED_4X4 = (
    " _______ \n"
    "| |___  |\n"
    "|_   _| |\n"
    "|  _____|\n"
    "|_______|\n"
)


def carved_4x4() -> Grid:
    grid = Grid(4, 4)

    grid.carve_passage((0, 0), Cell.SOUTH)
    grid.carve_passage((0, 1), Cell.EAST)
    grid.carve_passage((0, 2), Cell.EAST)
    grid.carve_passage((0, 2), Cell.SOUTH)
    grid.carve_passage((0, 3), Cell.EAST)

    grid.carve_passage((1, 0), Cell.EAST)
    grid.carve_passage((1, 1), Cell.EAST)
    grid.carve_passage((1, 1), Cell.SOUTH)
    grid.carve_passage((1, 2), Cell.EAST)
    grid.carve_passage((1, 3), Cell.EAST)

    grid.carve_passage((2, 0), Cell.EAST)
    grid.carve_passage((2, 2), Cell.EAST)
    grid.carve_passage((2, 3), Cell.EAST)

    grid.carve_passage((3, 1), Cell.NORTH)
    grid.carve_passage((3, 1), Cell.SOUTH)

    return grid
