# pipeline/logo_isolator.py
from pathlib import Path
import os
import logging

from dotenv import load_dotenv

from ..models.image import Image
from ..models.isolation_result import IsolationResult
from ..models.pixel_grid import PixelGrid
from ..services.background_service import BackgroundService
from ..services.island_service import IslandService
from ..services.image_service import ImageService

# ------------------------------------------------------------------
# env‑vars
load_dotenv()
WHITE_THRESHOLD = int(os.getenv("WHITE_THRESHOLD", "240"))
SPLIT_FRACTION  = float(os.getenv("SPLIT_FRACTION", "0.30"))
SOURCE_PATHS    = [p.strip() for p in
                   os.getenv("ISOLATE_SOURCE_PATHS", "assets/Logo/logo.png").split(",") if p.strip()]
OUTPUT_PATH     = os.getenv("ISOLATE_OUTPUT_PATH", "logo_transparent_master.png")

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
def isolate_logo(
    img: Image,
    *,
    background_service: BackgroundService = BackgroundService(),
    island_service: IslandService | None = None,
    white_threshold: int               = WHITE_THRESHOLD,
    split_fraction: float              = SPLIT_FRACTION,
) -> IsolationResult:
    """
    Strip the white background from *img* in place:
        • phase 1: flood fill from the white border pixels → transparent
        • phase 2: white islands right of the split line (letter holes)
                   → transparent, the ones on the icon side stay
    Returns the counters for both phases.
    """
    grid = PixelGrid(img.pixels, white_threshold=white_threshold)
    island_service = island_service or IslandService(split_fraction=split_fraction)

    logger.info("Phase 1: Removing surrounding background...")
    cleared = background_service.remove_border_background(grid)

    logger.info("Phase 2: Scanning for text holes...")
    kept, removed, removed_pixels = island_service.classify_islands(grid)

    return IsolationResult(
        background_pixels=cleared,
        kept_islands=kept,
        removed_islands=removed,
        removed_island_pixels=removed_pixels,
        split_x=island_service.split_x(grid.width),
    )


def isolate_logo_file(
    sources: list[str | Path] | None = None,
    output_path: str | Path = OUTPUT_PATH,
    *,
    image_service: ImageService = ImageService(),
    white_threshold: int        = WHITE_THRESHOLD,
    split_fraction: float       = SPLIT_FRACTION,
) -> IsolationResult:
    """
    Load the first existing source, isolate it, write the transparent master.
    Nothing is written when loading or isolating fails.
    """
    img = image_service.load_first(sources or SOURCE_PATHS)
    logger.info(f"Processing {img.path}...")

    result = isolate_logo(img, white_threshold=white_threshold, split_fraction=split_fraction)

    img.path = Path(output_path)
    result.output_path = image_service.save(img)
    return result


def log_isolation_results(result: IsolationResult) -> None:
    print(f"{'='*60}")
    print(f"Background pixels removed: {result.background_pixels}")
    print(f"Islands Processed: Kept {result.kept_islands} (Icon), "
          f"Removed {result.removed_islands} (Text holes).")
    print(f"Split line at x={result.split_x}")
    if result.output_path:
        print(f"Saved transparent master to {result.output_path}")
    print(f"{'='*60}")
