import unittest

import numpy as np

from mazes.directions import DX, DY, E, N, OPPOSITE, S, W
from mazes.grid import Grid


class GridTests(unittest.TestCase):
    def test_new_grid_has_no_passages(self) -> None:
        grid = Grid(3, 2)
        self.assertEqual(grid.to_list(), [[0, 0, 0], [0, 0, 0]])
        self.assertTrue(all(grid.is_unvisited(x, y) for x in range(3) for y in range(2)))

    def test_set_merges_flags(self) -> None:
        grid = Grid(2, 2)
        grid.set(1, 0, S)
        grid.set(1, 0, W)
        grid.set(1, 0, S)
        self.assertEqual(grid.get(1, 0), S | W)
        self.assertEqual(grid.get(0, 1), 0)

    def test_out_of_bounds_access_raises(self) -> None:
        grid = Grid(2, 3)
        for x, y in ((-1, 0), (2, 0), (0, 3), (0, -1)):
            with self.subTest(cell=(x, y)):
                with self.assertRaises(IndexError):
                    grid.get(x, y)
                with self.assertRaises(IndexError):
                    grid.set(x, y, N)

    def test_carve_opens_both_sides(self) -> None:
        grid = Grid(2, 2)
        self.assertEqual(grid.carve(0, 1, N), (0, 0))
        self.assertEqual(grid.get(0, 1), N)
        self.assertEqual(grid.get(0, 0), S)

    def test_carve_off_the_edge_raises_without_mutating(self) -> None:
        grid = Grid(2, 2)
        with self.assertRaises(IndexError):
            grid.carve(1, 1, E)
        self.assertEqual(grid.get(1, 1), 0)

    def test_dimensions_must_be_positive(self) -> None:
        for width, height in ((0, 1), (1, 0), (-3, 2)):
            with self.subTest(size=(width, height)):
                with self.assertRaises(ValueError):
                    Grid(width, height)

    def test_numpy_integer_dimensions(self) -> None:
        grid = Grid(np.int64(3), np.uint8(2))
        self.assertEqual((grid.width, grid.height), (3, 2))
        self.assertIs(type(grid.width), int)
        self.assertEqual(grid.cells.shape, (2, 3))

    def test_non_integer_dimensions_rejected(self) -> None:
        for width, height in ((2.5, 2), ("3", 2), (2, None)):
            with self.subTest(size=(width, height)):
                with self.assertRaises(ValueError):
                    Grid(width, height)

    def test_cells_view_is_read_only(self) -> None:
        grid = Grid(2, 2)
        with self.assertRaises(ValueError):
            grid.cells[0, 0] = E

    def test_copy_and_equality(self) -> None:
        grid = Grid(2, 1)
        grid.carve(0, 0, E)
        clone = grid.copy()
        self.assertEqual(grid, clone)
        clone.set(0, 0, S)
        self.assertNotEqual(grid, clone)


class DirectionTableTests(unittest.TestCase):
    def test_opposites_cancel_offsets(self) -> None:
        for direction in (N, S, E, W):
            opposite = OPPOSITE[direction]
            self.assertEqual(OPPOSITE[opposite], direction)
            self.assertEqual(DX[direction] + DX[opposite], 0)
            self.assertEqual(DY[direction] + DY[opposite], 0)

    def test_tables_are_immutable(self) -> None:
        with self.assertRaises(TypeError):
            OPPOSITE[N] = N  # type: ignore[index]


if __name__ == "__main__":
    unittest.main()
