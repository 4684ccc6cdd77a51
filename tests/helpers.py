import numpy as np

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)


def solid(width, height, color=WHITE):
    """(H, W, 4) uint8 grid filled with one RGBA colour."""
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[...] = color
    return pixels


def enclosed_island(pixels, center_x, center_y, radius=1):
    """
    Paint a black ring around a white (2r+1)x(2r+1) square so the square is
    cut off from the border.
    """
    x0, x1 = center_x - radius - 1, center_x + radius + 1
    y0, y1 = center_y - radius - 1, center_y + radius + 1
    pixels[y0:y1 + 1, x0:x1 + 1] = BLACK
    pixels[y0 + 1:y1, x0 + 1:x1] = WHITE
    return pixels
