import math
import unittest

from indexastar.astar import search
from indexastar.grid import (
    Grid,
    TerrainGrid,
    admissible_terrain_octile,
    generate_maze,
    generate_terrain,
    manhattan,
    octile,
    render_ascii,
)
from indexastar.scenarios import DEMO_WALLS, demo_grid


class TestGrid(unittest.TestCase):
    def test_neighbor_order_and_bounds(self):
        g = Grid(3, 3)
        self.assertEqual(g.neighbors((1, 1)), [(2, 1), (0, 1), (1, 2), (1, 0)])
        self.assertEqual(g.neighbors((0, 0)), [(1, 0), (0, 1)])

    def test_walls_are_skipped(self):
        g = Grid(3, 3)
        g.add_obstacle(2, 1)
        g.add_obstacle(1, 0)
        self.assertEqual(g.neighbors((1, 1)), [(0, 1), (1, 2)])

    def test_diagonal_moves(self):
        g = Grid(3, 3, diagonal=True, step=2.0)
        self.assertEqual(len(g.neighbors((1, 1))), 8)
        self.assertEqual(g.cost((0, 0), (1, 0)), 2.0)
        self.assertAlmostEqual(g.cost((0, 0), (1, 1)), 2.0 * math.sqrt(2))

    def test_terrain_cost_uses_entered_cell(self):
        tg = TerrainGrid(2, 1, terrain={(1, 0): 3.0})
        self.assertEqual(tg.cost((0, 0), (1, 0)), 3.0)
        self.assertEqual(tg.cost((1, 0), (0, 0)), 1.0)

    def test_heuristics(self):
        self.assertEqual(manhattan((0, 0), (3, 4)), 7.0)
        self.assertAlmostEqual(octile((0, 0), (3, 4)), 1 + 3 * math.sqrt(2))
        self.assertEqual(octile((2, 2), (2, 2)), 0.0)

    def test_terrain_heuristic_is_consistent(self):
        tg = TerrainGrid(8, 8, diagonal=True, terrain=generate_terrain(8, 8, seed=3))
        h = admissible_terrain_octile(tg)
        goal = (7, 7)
        for x in range(8):
            for y in range(8):
                for q in tg.neighbors((x, y)):
                    self.assertLessEqual(h((x, y), goal), tg.cost((x, y), q) + h(q, goal) + 1e-9)
        _, cost = search((0, 0), goal, tg, h)
        self.assertGreaterEqual(cost, h((0, 0), goal) - 1e-9)

    def test_terrain_heuristic_counts_uncovered_cells(self):
        tg = TerrainGrid(4, 1, terrain={(1, 0): 2.0})
        h = admissible_terrain_octile(tg)
        self.assertEqual(h((0, 0), (3, 0)), 3.0)

    def test_generate_terrain_is_seeded(self):
        self.assertEqual(generate_terrain(5, 5, seed=1), generate_terrain(5, 5, seed=1))
        self.assertTrue(set(generate_terrain(5, 5).values()) <= {1.0, 1.5, 2.0, 3.0})

    def test_maze_reachability(self):
        g = generate_maze(31, 31, seed=5)
        self.assertNotIn((0, 0), g.walls)
        self.assertNotIn((30, 30), g.walls)
        path, cost = search((0, 0), (30, 30), g, manhattan)
        self.assertEqual(cost, len(path) - 1)
        self.assertGreaterEqual(cost, 60)
        self.assertEqual(generate_maze(31, 31, seed=5).walls, g.walls)


class TestRenderAscii(unittest.TestCase):
    def test_demo_rendering(self):
        grid = demo_grid()
        path, _ = search((0, 0), (6, 0), grid, manhattan)
        lines = render_ascii(grid, path, (0, 0), (6, 0)).splitlines()
        self.assertEqual(len(lines), grid.height + 3)
        self.assertEqual(lines[0], "    0 1 2 3 4 5 6 7 8 9")
        self.assertEqual(lines[1], "  +-" + "-" * 20 + "-+")
        self.assertEqual(lines[-1], lines[1])

        def cell(x, y):
            row = lines[2 + y]
            return row[4 + 2 * x: 6 + 2 * x]

        self.assertTrue(lines[2].startswith(" 0| "))
        self.assertTrue(lines[2].endswith(" |"))
        self.assertEqual(cell(0, 0), "S ")
        self.assertEqual(cell(6, 0), "G ")
        for x, y in DEMO_WALLS:
            self.assertEqual(cell(x, y), "##")
        for x, y in path[1:-1]:
            self.assertEqual(cell(x, y), "..")
        self.assertEqual(cell(9, 9), "  ")


if __name__ == "__main__":
    unittest.main()
