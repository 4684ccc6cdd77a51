import unittest
import os
import sys

import numpy as np

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from logokit.models.pixel_grid import PixelGrid
from logokit.models.island import Island
from tests.helpers import solid


class TestPixelGrid(unittest.TestCase):
    def test_dimensions(self):
        grid = PixelGrid(solid(7, 3))
        self.assertEqual(grid.width, 7)
        self.assertEqual(grid.height, 3)

    def test_threshold_is_strict(self):
        pixels = solid(3, 1)
        pixels[0, 0, :3] = (240, 255, 255)
        pixels[0, 1, :3] = (241, 241, 241)
        pixels[0, 2, :3] = (255, 255, 240)
        grid = PixelGrid(pixels)

        self.assertFalse(grid.is_white(0, 0))
        self.assertTrue(grid.is_white(1, 0))
        self.assertFalse(grid.is_white(2, 0))

    def test_custom_threshold(self):
        pixels = solid(1, 1, (200, 200, 200, 255))
        self.assertTrue(PixelGrid(pixels, white_threshold=199).is_white(0, 0))
        self.assertFalse(PixelGrid(pixels, white_threshold=200).is_white(0, 0))

    def test_whiteness_ignores_alpha(self):
        grid = PixelGrid(solid(1, 1, (255, 255, 255, 0)))
        self.assertTrue(grid.is_white(0, 0))
        self.assertFalse(grid.is_opaque(0, 0))

    def test_clear_only_touches_alpha(self):
        pixels = solid(2, 2, (10, 20, 30, 200))
        grid = PixelGrid(pixels)
        grid.clear(1, 0)
        self.assertEqual(tuple(pixels[0, 1]), (10, 20, 30, 0))
        self.assertEqual(tuple(pixels[0, 0]), (10, 20, 30, 200))

    def test_mutates_caller_buffer(self):
        pixels = solid(2, 2)
        PixelGrid(pixels).clear(0, 0)
        self.assertEqual(pixels[0, 0, 3], 0)

    def test_neighbors_are_four_connected(self):
        grid = PixelGrid(solid(3, 3))
        self.assertEqual(set(grid.neighbors(1, 1)), {(2, 1), (0, 1), (1, 2), (1, 0)})

    def test_neighbors_respect_bounds(self):
        grid = PixelGrid(solid(3, 3))
        self.assertEqual(set(grid.neighbors(0, 0)), {(1, 0), (0, 1)})
        self.assertEqual(set(grid.neighbors(2, 2)), {(1, 2), (2, 1)})

    def test_in_bounds(self):
        grid = PixelGrid(solid(3, 2))
        self.assertTrue(grid.in_bounds(2, 1))
        self.assertFalse(grid.in_bounds(3, 1))
        self.assertFalse(grid.in_bounds(0, -1))

    def test_border_visits_each_pixel_once(self):
        grid = PixelGrid(solid(5, 4))
        border = list(grid.border())
        self.assertEqual(len(border), len(set(border)))
        self.assertEqual(len(border), 2 * 5 + 2 * 4 - 4)
        for x, y in border:
            self.assertTrue(x in (0, 4) or y in (0, 3))

    def test_border_of_thin_grids(self):
        self.assertEqual(list(PixelGrid(solid(1, 1)).border()), [(0, 0)])
        self.assertEqual(sorted(PixelGrid(solid(3, 1)).border()), [(0, 0), (1, 0), (2, 0)])
        self.assertEqual(sorted(PixelGrid(solid(1, 3)).border()), [(0, 0), (0, 1), (0, 2)])

    def test_new_visited_is_fresh(self):
        grid = PixelGrid(solid(4, 2))
        first = grid.new_visited()
        first[0, 0] = True
        second = grid.new_visited()
        self.assertEqual(second.shape, (2, 4))
        self.assertFalse(second.any())

    def test_rejects_rgb(self):
        with self.assertRaises(ValueError):
            PixelGrid(np.zeros((2, 2, 3), dtype=np.uint8))

    def test_rejects_wrong_dtype(self):
        with self.assertRaises(ValueError):
            PixelGrid(np.zeros((2, 2, 4), dtype=np.float32))

    def test_rejects_empty(self):
        with self.assertRaises(ValueError):
            PixelGrid(np.zeros((0, 5, 4), dtype=np.uint8))


class TestIsland(unittest.TestCase):
    def test_tracks_x_extent(self):
        island = Island(min_x=4, max_x=4)
        island.add(4, 0)
        island.add(2, 1)
        island.add(9, 1)
        self.assertEqual((island.min_x, island.max_x), (2, 9))
        self.assertEqual(len(island), 3)

    def test_center_is_bounding_box_midpoint(self):
        island = Island(min_x=0, max_x=0)
        # Many pixels on the left do not pull the centre
        for y in range(10):
            island.add(0, y)
        island.add(5, 0)
        self.assertEqual(island.center_x, 2.5)


if __name__ == "__main__":
    unittest.main()
