import math
import logging
from typing import Iterator, Tuple

import numpy as np

from ..models.island import Island
from ..models.pixel_grid import PixelGrid

logger = logging.getLogger(__name__)


class IslandService:
    """
    Finds the white regions that survived the border flood fill and decides
    which of them are holes inside letters.

    A composite logo is assumed to be an icon on the left and a wordmark on
    the right. Islands whose bounding-box centre lies right of
    ``split_fraction * width`` are letter counters and get cleared; the rest
    belong to the icon and are kept.
    """

    def __init__(self, split_fraction: float = 0.30):
        if not 0.0 <= split_fraction <= 1.0:
            raise ValueError(f"split_fraction must be within [0, 1], got {split_fraction}")
        self.split_fraction = split_fraction

    def split_x(self, width: int) -> int:
        return math.floor(width * self.split_fraction)

    @staticmethod
    def _qualifies(grid: PixelGrid, x: int, y: int) -> bool:
        return grid.is_opaque(x, y) and grid.is_white(x, y)

    def _collect(self, grid: PixelGrid, x: int, y: int, visited: np.ndarray) -> Island:
        island = Island(min_x=x, max_x=x)
        visited[y, x] = True
        stack = [(x, y)]

        while stack:
            cx, cy = stack.pop()
            island.add(cx, cy)

            for nx, ny in grid.neighbors(cx, cy):
                if not visited[ny, nx] and self._qualifies(grid, nx, ny):
                    visited[ny, nx] = True
                    stack.append((nx, ny))

        return island

    def find_islands(self, grid: PixelGrid) -> Iterator[Island]:
        """
        Yield islands in row-major order of their first pixel.

        Islands are produced lazily so a caller can clear one before the scan
        moves on; clearing an island never changes which pixels make up the
        ones still to come.
        """
        visited = grid.new_visited()
        for y in range(grid.height):
            for x in range(grid.width):
                if visited[y, x] or not self._qualifies(grid, x, y):
                    continue
                yield self._collect(grid, x, y, visited)

    def is_text_hole(self, island: Island, split_x: int) -> bool:
        return island.center_x > split_x

    def classify_islands(self, grid: PixelGrid) -> Tuple[int, int, int]:
        """
        Clear every island in the text zone.

        Returns:
            (kept, removed, removed_pixels)
        """
        split_x = self.split_x(grid.width)
        kept = removed = removed_pixels = 0

        for island in self.find_islands(grid):
            if self.is_text_hole(island, split_x):
                for px, py in island.pixels:
                    grid.clear(px, py)
                removed += 1
                removed_pixels += len(island)
            else:
                kept += 1

        logger.debug(f"split_x={split_x}: kept {kept}, removed {removed} islands")
        return kept, removed, removed_pixels
