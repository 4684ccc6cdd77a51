from __future__ import annotations
from typing import Iterator, Tuple
import numpy as np

CHANNELS = 4  # RGBA
ALPHA = 3

# 4-connected: right, left, down, up. No diagonals.
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


class PixelGrid:
    """
    In-place view over an RGBA pixel buffer used by the isolation passes.

    The buffer is the caller's (H, W, 4) uint8 array, addressed as
    ``pixels[y, x, channel]``. Only the alpha channel is ever written, so the
    whiteness mask is computed once up front.
    """

    def __init__(self, pixels: np.ndarray, white_threshold: int = 240):
        if pixels.ndim != 3 or pixels.shape[2] != CHANNELS:
            raise ValueError(f"Expected an (H, W, {CHANNELS}) RGBA array, got shape {pixels.shape}")
        if pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 pixels, got {pixels.dtype}")
        if pixels.shape[0] == 0 or pixels.shape[1] == 0:
            raise ValueError("Cannot process an empty image")

        self.pixels = pixels
        self.height, self.width = pixels.shape[:2]
        self.white_threshold = white_threshold
        self._white = (pixels[..., :3] > white_threshold).all(axis=-1)

    # ── Predicates ───────────────────────────────────────────────────
    def is_white(self, x: int, y: int) -> bool:
        return bool(self._white[y, x])

    def is_opaque(self, x: int, y: int) -> bool:
        return self.pixels[y, x, ALPHA] != 0

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    # ── Mutation ─────────────────────────────────────────────────────
    def clear(self, x: int, y: int) -> None:
        """Make a pixel fully transparent (colour channels untouched)."""
        self.pixels[y, x, ALPHA] = 0

    # ── Traversal helpers ────────────────────────────────────────────
    def new_visited(self) -> np.ndarray:
        """Fresh all-false marker set; each pass owns its own."""
        return np.zeros((self.height, self.width), dtype=bool)

    def neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        for dx, dy in NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                yield nx, ny

    def border(self) -> Iterator[Tuple[int, int]]:
        """
        Every border coordinate exactly once: top and bottom rows, then the
        left and right columns without their corners.
        """
        w, h = self.width, self.height
        for x in range(w):
            yield x, 0
            if h > 1:
                yield x, h - 1
        for y in range(1, h - 1):
            yield 0, y
            if w > 1:
                yield w - 1, y
