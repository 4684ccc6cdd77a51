from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class AssetSize:
    """Target box for one generated asset (contain-fit, letterboxed)."""
    width: int
    height: int
    name: Optional[str] = None  # platform label, e.g. "og" or "instagram"

    @property
    def is_square(self) -> bool:
        return self.width == self.height


@dataclass(frozen=True)
class Variant:
    """
    Background treatment for an asset. ``background`` of None keeps the
    alpha channel, anything else is flattened onto that colour.
    """
    name: str
    background: Optional[RGB] = None

    @property
    def formats(self) -> Tuple[str, ...]:
        # JPEG has no alpha, so only backgrounded variants get one.
        if self.background is None:
            return ("png", "webp")
        return ("png", "webp", "jpg")


@dataclass
class AssetReport:
    """
    What a generation run produced on disk.
    """
    generated: List[Path] = field(default_factory=list)
    favicons: List[Path] = field(default_factory=list)
    ico_path: Path | None = None
    copied: List[Path] = field(default_factory=list)
