from collections import deque
import logging

from ..models.pixel_grid import PixelGrid

logger = logging.getLogger(__name__)


class BackgroundService:
    """
    Border-seeded background removal.

    Every near-white pixel that can be reached from a near-white border
    pixel, moving only up/down/left/right through near-white pixels, is made
    transparent. White areas enclosed by artwork are left alone; they are
    the island pass's business.
    """

    def remove_border_background(self, grid: PixelGrid) -> int:
        """
        Multi-source BFS from the white border pixels.

        Returns:
            int: number of pixels made transparent.
        """
        visited = grid.new_visited()
        queue = deque()

        # seed from edges
        for x, y in grid.border():
            if grid.is_white(x, y):
                visited[y, x] = True
                queue.append((x, y))

        logger.debug(f"Seeded flood fill with {len(queue)} border pixels")

        cleared = 0
        while queue:
            x, y = queue.popleft()
            grid.clear(x, y)
            cleared += 1

            for nx, ny in grid.neighbors(x, y):
                if not visited[ny, nx] and grid.is_white(nx, ny):
                    visited[ny, nx] = True
                    queue.append((nx, ny))

        return cleared
