from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple
import os
import logging

from dotenv import load_dotenv

from ..models.asset import AssetSize, Variant
from ..models.image import Image
from .image_service import ImageService

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def parse_hex_color(value: str) -> Tuple[int, int, int]:
    """'#8B5CF6' or '8b5cf6' → (139, 92, 246)."""
    raw = value.strip().lstrip("#")
    if len(raw) == 3:
        raw = "".join(ch * 2 for ch in raw)
    if len(raw) != 6:
        raise ValueError(f"Invalid hex colour: {value!r}")
    try:
        return tuple(int(raw[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        raise ValueError(f"Invalid hex colour: {value!r}") from None


class AssetService:
    """
    Renders one master image into sized, backgrounded, encoded assets.
    Naming and encoder settings live here; the size/variant matrix is the
    pipeline's concern.
    """

    def __init__(self,
                 prefix: str = None,
                 configuration_name: str = None):
        self.prefix = prefix or os.getenv("ASSET_PREFIX", "LOGO")
        self.configuration_name = configuration_name or os.getenv("ASSET_CONFIGURATION_NAME", "full")

        # Encoder settings per output format
        self.save_options: Dict[str, dict] = {
            "png": {"compress_level": int(os.getenv("PNG_COMPRESSION_LEVEL", "9"))},
            "webp": {"quality": int(os.getenv("WEBP_QUALITY", "90"))},
            "jpg": {"quality": int(os.getenv("JPEG_QUALITY", "90"))},
        }
        self.image_service = ImageService()

    # ─── Naming ───────────────────────────────────────────────────────
    def file_name(self, variant: str, platform: str, size: AssetSize, ext: str) -> str:
        """
        {prefix}_{config[_variant]}_{platform}_{W or WxH}.{ext}

        The transparent variant carries no variant suffix, and a size's own
        name wins over its context.
        """
        variant_str = self.configuration_name if variant == "transparent" \
            else f"{self.configuration_name}_{variant}"
        final_platform = size.name or platform
        size_str = f"{size.width}" if size.is_square else f"{size.width}x{size.height}"
        return f"{self.prefix}_{variant_str}_{final_platform}_{size_str}.{ext}"

    def favicon_name(self, size: AssetSize) -> str:
        return f"{self.prefix}_favicon_{size.width}.png"

    # ─── Rendering ────────────────────────────────────────────────────
    def render(self, master: Image, size: AssetSize, variant: Variant) -> Image:
        """
        Contain-fit the master into ``size``. Backgrounded variants come back
        flattened to RGB, the transparent variant as RGBA.
        """
        pixels = self.image_service.resize_contain(master, size.width, size.height,
                                                   background=variant.background)
        if variant.background is not None:
            pixels = self.image_service.flatten(pixels, variant.background)
        else:
            pixels = self.image_service.ensure_alpha(pixels)
        return self.image_service.create_image(pixels)

    def render_favicon(self, master: Image, size: AssetSize) -> Image:
        pixels = self.image_service.resize_contain(master, size.width, size.height, background=None)
        return self.image_service.create_image(pixels)

    def write(self, image: Image, path: Path, fmt: Optional[str] = None) -> Path:
        """Encode with the format's settings and save to ``path``."""
        path = Path(path)
        fmt = fmt or path.suffix.lstrip(".").lower()
        image.path = path
        return self.image_service.save(image, **self.save_options.get(fmt, {}))
