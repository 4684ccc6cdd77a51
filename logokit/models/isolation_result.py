from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path


@dataclass
class IsolationResult:
    """
    Counters collected while isolating a logo from its white background.
    """
    background_pixels: int = 0  # pixels cleared by the border flood fill
    kept_islands: int = 0       # white islands left of the split line (icon)
    removed_islands: int = 0    # white islands right of it (text holes)
    removed_island_pixels: int = 0
    split_x: int = 0
    output_path: Path | None = None
