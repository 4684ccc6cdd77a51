from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class Island:
    """
    A 4-connected group of opaque white pixels found after the border
    flood fill. Only lives long enough to be classified.
    """
    min_x: int
    max_x: int
    pixels: List[Tuple[int, int]] = field(default_factory=list)  # (x, y)

    def add(self, x: int, y: int) -> None:
        self.pixels.append((x, y))
        if x < self.min_x:
            self.min_x = x
        if x > self.max_x:
            self.max_x = x

    @property
    def center_x(self) -> float:
        # Bounding-box midpoint, not the pixel centroid.
        return (self.min_x + self.max_x) / 2

    def __len__(self) -> int:
        return len(self.pixels)
