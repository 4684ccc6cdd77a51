"""
Asset Generator Pipeline
Turns the transparent logo master into the full web / social / app / favicon
kit, in every background variant and output format.
"""

from pathlib import Path
from typing import Dict, List, Sequence
import os
import logging

from dotenv import load_dotenv
from tqdm import tqdm

from ..models.asset import AssetReport, AssetSize, Variant
from ..services.asset_service import AssetService, parse_hex_color
from ..services.image_service import ImageService

# Load environment variables
load_dotenv()

SOURCE_FILE = os.getenv("ASSET_SOURCE_PATH", "logo_transparent_master.png")
OUTPUT_DIR  = os.getenv("ASSET_OUTPUT_DIR", "logo-kit")
COPY_DIR    = os.getenv("ASSET_COPY_DIR", "logo-kit/key-assets")

# Brand colours (hex, parsed when the variants are built)
BRAND_PRIMARY = os.getenv("BRAND_PRIMARY", "#8B5CF6")
BRAND_DARK    = os.getenv("BRAND_DARK", "#1A1A2E")
BRAND_WHITE   = os.getenv("BRAND_WHITE", "#FFFFFF")

FAVICON_CONTEXT = "favicon"

# Size buckets (web & social)
SIZE_CONFIG: Dict[str, List[AssetSize]] = {
    "web": [
        AssetSize(1200, 300, "header"),
        AssetSize(800, 200, "header-compact"),
        AssetSize(1200, 630, "og"),
        AssetSize(192, 192, "app-icon"),
        AssetSize(512, 512, "app-icon"),
    ],
    "social": [
        AssetSize(1080, 1080, "instagram"),
        AssetSize(1080, 1080, "facebook"),
        AssetSize(400, 400, "linkedin"),
        AssetSize(400, 400, "twitter"),
        AssetSize(800, 800, "youtube"),
        AssetSize(200, 200, "tiktok"),
    ],
    "app": [
        AssetSize(1024, 1024, "store"),
    ],
    FAVICON_CONTEXT: [
        AssetSize(16, 16),
        AssetSize(32, 32),
        AssetSize(48, 48),
    ],
}

def default_variants() -> List[Variant]:
    """Transparent plus one variant per brand colour. Raises ValueError on a bad hex value."""
    return [
        Variant("transparent"),
        Variant("light", parse_hex_color(BRAND_WHITE)),
        Variant("dark", parse_hex_color(BRAND_DARK)),
        Variant("brand", parse_hex_color(BRAND_PRIMARY)),
    ]

ICO_NAME = "favicon.ico"

logger = logging.getLogger(__name__)


def key_asset_paths(output_dir: str | Path, asset_service: AssetService) -> List[Path]:
    """The handful of files worth copying next to the brand folder."""
    output_dir = Path(output_dir)
    transparent = "transparent"
    return [
        output_dir / "app" / asset_service.file_name(transparent, "app", AssetSize(1024, 1024, "store"), "png"),
        output_dir / "web" / asset_service.file_name(transparent, "web", AssetSize(1200, 630, "og"), "png"),
        output_dir / "social" / asset_service.file_name(transparent, "social", AssetSize(1080, 1080, "instagram"), "png"),
        output_dir / FAVICON_CONTEXT / ICO_NAME,
    ]


def generate_assets(
    source_file: str | Path = SOURCE_FILE,
    output_dir: str | Path = OUTPUT_DIR,
    copy_dir: str | Path | None = COPY_DIR,
    *,
    size_config: Dict[str, Sequence[AssetSize]] = None,
    variants: Sequence[Variant] = None,
    image_service: ImageService = ImageService(),
    asset_service: AssetService = None,
    show_progress: bool = True,
) -> AssetReport:
    """
    Generate the asset kit from the transparent master.

    1. every non-favicon size × variant × format → {output_dir}/{context}/
    2. favicon PNGs on a transparent canvas + a multi-size favicon.ico
    3. copy the key assets into *copy_dir* (skipped when None)

    Args:
        source_file: Transparent master PNG
        output_dir: Root of the generated kit
        copy_dir: Where the key assets are copied
        size_config: Context → sizes table (defaults to SIZE_CONFIG)
        variants: Background variants (defaults to default_variants())

    Returns:
        AssetReport: Paths of everything written
    """
    size_config = SIZE_CONFIG if size_config is None else size_config
    variants = default_variants() if variants is None else variants
    asset_service = asset_service or AssetService()

    source_file = Path(source_file)
    if not source_file.is_file():
        raise FileNotFoundError(f"{source_file} not found. Run the logo isolation step first.")

    logger.info(f"Starting asset generation from {source_file}...")
    master = image_service.load(source_file)
    output_dir = Path(output_dir)
    for context in size_config:
        image_service.ensure_dir(output_dir / context)

    report = AssetReport()

    # ─── Sized variants ───────────────────────────────────────────────
    jobs = [
        (context, size, variant, fmt)
        for context, sizes in size_config.items() if context != FAVICON_CONTEXT
        for size in sizes
        for variant in variants
        for fmt in variant.formats
    ]
    for context, size, variant, fmt in tqdm(jobs, desc="Generating assets", disable=not show_progress):
        file_name = asset_service.file_name(variant.name, context, size, fmt)
        rendered = asset_service.render(master, size, variant)
        report.generated.append(asset_service.write(rendered, output_dir / context / file_name, fmt))
        logger.debug(f"Generated: {file_name}")

    # ─── Favicons ─────────────────────────────────────────────────────
    favicon_sizes = size_config.get(FAVICON_CONTEXT, [])
    if favicon_sizes:
        logger.info("Processing favicons...")
        favicon_dir = output_dir / FAVICON_CONTEXT
        favicon_images = []
        for size in favicon_sizes:
            favicon = asset_service.render_favicon(master, size)
            report.favicons.append(asset_service.write(favicon, favicon_dir / asset_service.favicon_name(size), "png"))
            favicon_images.append(favicon)

        try:
            report.ico_path = image_service.save_ico(favicon_images, favicon_dir / ICO_NAME)
            logger.info(f"Generated: {ICO_NAME}")
        except (OSError, ValueError) as err:
            # The PNG favicons are still usable without the .ico
            logger.error(f"ICO Error: {err}")

    # ─── Key assets ───────────────────────────────────────────────────
    if copy_dir is not None:
        logger.info(f"Copying key assets to {copy_dir}...")
        existing = [p for p in key_asset_paths(output_dir, asset_service) if p.is_file()]
        report.copied = image_service.copy_existing(existing, copy_dir)

    return report


def log_asset_results(report: AssetReport, output_dir: str | Path = OUTPUT_DIR) -> None:
    print(f"{'='*60}")
    print(f"Asset generation complete!")
    print(f"   Generated: {len(report.generated)} assets, {len(report.favicons)} favicons")
    if report.ico_path:
        print(f"   Icon: {report.ico_path}")
    for path in report.copied:
        print(f"   Copied: {path.name}")
    print(f"   Output: {output_dir}")
    print(f"{'='*60}")
