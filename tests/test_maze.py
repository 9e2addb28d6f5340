import unittest

from mazes import Maze
from mazes.directions import E, N, S, W
from mazes.maze import MAX_SEED

GOLDEN_BINARY_TREE_2X1_SEED_42 = " ___\n|___|\n width: 2, height: 1, seed: 42\n"


class MazeTests(unittest.TestCase):
    def test_binary_tree_golden_rendering(self) -> None:
        maze = Maze.generate(2, 1, 42, algorithm="binary-tree")
        self.assertEqual(maze.grid.to_list(), [[E, W]])
        self.assertEqual(maze.render(), GOLDEN_BINARY_TREE_2X1_SEED_42)

    def test_rendering_is_idempotent(self) -> None:
        maze = Maze.generate(8, 5, 1234)
        self.assertEqual(maze.render(), maze.render())

    def test_single_cell_renders_a_closed_box(self) -> None:
        for algorithm in ("binary-tree", "backtracker"):
            with self.subTest(algorithm=algorithm):
                maze = Maze.generate(1, 1, 7, algorithm=algorithm)
                self.assertEqual(maze.render(), " _\n|_|\n width: 1, height: 1, seed: 7\n")

    def test_render_shape(self) -> None:
        maze = Maze.generate(6, 4, 3, algorithm="backtracker")
        lines = maze.render().splitlines()
        self.assertEqual(len(lines), 4 + 2)
        self.assertEqual(lines[0], " " + "_" * 11)
        for row in lines[1:-1]:
            self.assertEqual(len(row), 1 + 2 * 6)
            self.assertTrue(row.startswith("|"))
            self.assertTrue(row.endswith("|"))
        self.assertEqual(lines[-1], " width: 6, height: 4, seed: 3")

    def test_same_inputs_same_maze(self) -> None:
        for algorithm in ("binary-tree", "backtracker"):
            with self.subTest(algorithm=algorithm):
                first = Maze.generate(9, 9, 555, algorithm=algorithm)
                second = Maze.generate(9, 9, 555, algorithm=algorithm)
                self.assertEqual(first.grid, second.grid)
                self.assertEqual(first.render(), second.render())

    def test_missing_seed_is_chosen_and_reported(self) -> None:
        maze = Maze(3, 3)
        self.assertIsInstance(maze.seed, int)
        self.assertTrue(0 <= maze.seed < MAX_SEED)
        maze.carve("backtracker")
        self.assertIn(f"seed: {maze.seed}", maze.render())
        replay = Maze.generate(3, 3, maze.seed)
        self.assertEqual(replay.grid, maze.grid)

    def test_carving_twice_is_rejected(self) -> None:
        maze = Maze.generate(3, 3, 1)
        with self.assertRaises(RuntimeError):
            maze.carve("binary-tree")

    def test_inspect_dumps_cell_values(self) -> None:
        maze = Maze.generate(2, 1, 42, algorithm="binary-tree")
        self.assertEqual(maze.inspect(), f"{E} {W}\n")

    def test_to_dict(self) -> None:
        maze = Maze.generate(2, 2, 10, algorithm="backtracker")
        payload = maze.to_dict()
        self.assertEqual(payload["width"], 2)
        self.assertEqual(payload["height"], 2)
        self.assertEqual(payload["seed"], 10)
        self.assertEqual(payload["algorithm"], "backtracker")
        self.assertEqual(payload["grid"], maze.grid.to_list())

    def test_fresh_maze_is_uncarved_and_carves_once(self) -> None:
        maze = Maze(3, 3, 1)
        self.assertFalse(maze.carved)
        self.assertIsNone(maze.to_dict()["algorithm"])
        maze.carve("backtracker")
        self.assertTrue(maze.carved)
        self.assertEqual(maze.to_dict()["algorithm"], "backtracker")

    def test_algorithm_is_not_a_constructor_argument(self) -> None:
        with self.assertRaises(TypeError):
            Maze(3, 3, 1, "backtracker")
        with self.assertRaises(TypeError):
            Maze(3, 3, seed=1, algorithm="binary-tree")

    def test_invalid_dimensions(self) -> None:
        with self.assertRaises(ValueError):
            Maze(0, 5, 1)

    def test_uncarved_maze_renders_every_wall(self) -> None:
        maze = Maze(2, 2, 0)
        self.assertFalse(maze.carved)
        self.assertEqual(maze.render(), " ___\n|_|_|\n|_|_|\n width: 2, height: 2, seed: 0\n")
        self.assertEqual(maze.grid.get(0, 0) & (N | S), 0)


if __name__ == "__main__":
    unittest.main()
