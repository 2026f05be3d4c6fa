import unittest

from helpers import EXPECTED_4X4, carved_4x4

from orthomaze.grid import DIRECTIONS, Cell
from orthomaze.maze import OrthogonalMaze


class OrthogonalMazeTests(unittest.TestCase):
    def test_new_maze_is_valid(self) -> None:
        maze = OrthogonalMaze(4, 3)
        self.assertTrue(maze.is_valid())
        self.assertEqual((maze.width, maze.height), (4, 3))
        self.assertTrue(all(cell.wall_count() == 4 for cell in maze.grid.cells()))

    def test_display_orthogonal_maze(self) -> None:
        maze = OrthogonalMaze.from_grid(carved_4x4())
        self.assertEqual(str(maze), EXPECTED_4X4)

    def test_carved_maze_is_valid(self) -> None:
        maze = OrthogonalMaze.from_grid(carved_4x4())
        self.assertTrue(maze.is_valid())

    def test_from_grid_adopts_the_given_grid(self) -> None:
        grid = carved_4x4()
        maze = OrthogonalMaze.from_grid(grid)
        self.assertIs(maze.grid, grid)

    def test_mismatched_grid_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            OrthogonalMaze(3, 3, grid=carved_4x4())

    def test_grid_accessor_mutates_owned_grid(self) -> None:
        maze = OrthogonalMaze(2, 2)
        maze.grid.carve_passage((0, 0), Cell.EAST)
        self.assertFalse(maze.grid[0, 0].has_wall(Cell.EAST))
        self.assertFalse(maze.grid[1, 0].has_wall(Cell.WEST))

    def test_open_cell_makes_maze_invalid(self) -> None:
        maze = OrthogonalMaze(3, 3)
        for direction in DIRECTIONS:
            maze.grid.carve_passage((1, 1), direction)
        self.assertEqual(maze.grid[1, 1].wall_count(), 0)
        self.assertFalse(maze.is_valid())

        maze.grid.add_wall((1, 1), Cell.NORTH)
        self.assertTrue(maze.is_valid())

    def test_disconnected_regions_are_still_valid(self) -> None:
        maze = OrthogonalMaze(3, 1)
        maze.grid.carve_passage((0, 0), Cell.EAST)
        self.assertTrue(maze.is_valid())

    def test_boundary_openings_are_valid(self) -> None:
        maze = OrthogonalMaze(1, 1)
        for direction in (Cell.NORTH, Cell.SOUTH, Cell.EAST):
            maze.grid.carve_passage((0, 0), direction)
        self.assertTrue(maze.is_valid())
        maze.grid.carve_passage((0, 0), Cell.WEST)
        self.assertFalse(maze.is_valid())


if __name__ == "__main__":
    unittest.main()
