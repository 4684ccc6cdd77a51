from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union
import numpy as np
import cv2

from ..models.image import Image
from ..repositories.image_repository import ImageRepository

PathLike = Union[str, Path]
RGB = Tuple[int, int, int]


class ImageService:
    """I/O helpers plus the pixel maths shared by the asset pipeline."""
    def __init__(self):
        self.image_repository = ImageRepository()

    def create_image(self, pixels: np.ndarray, path: PathLike = None) -> Image:
        return self.image_repository.create_image(pixels, path)

    def load(self, path: PathLike) -> Image:
        """Load a single image from disk into an RGBA Image object."""
        return self.image_repository.load(path)

    def load_first(self, candidates: Sequence[PathLike]) -> Image:
        """Load the first existing image out of a list of fallbacks."""
        return self.image_repository.load_first(candidates)

    def save(self, image: Image, **save_kwargs) -> Path:
        """
        Business-level method to save the image to its own path.
        """
        return self.image_repository.save(image, **save_kwargs)

    def save_ico(self, images: List[Image], path: PathLike) -> Path:
        return self.image_repository.save_ico(images, path)

    def copy_existing(self, files: Sequence[PathLike], dest_dir: PathLike) -> List[Path]:
        return self.image_repository.copy_existing(files, dest_dir)

    def ensure_dir(self, path: PathLike) -> Path:
        return self.image_repository.ensure_dir(path)

    # ─── Pixel helpers ────────────────────────────────────────────────
    @staticmethod
    def _fit_size(src_w: int, src_h: int, box_w: int, box_h: int) -> Tuple[int, int]:
        scale = min(box_w / src_w, box_h / src_h)
        return max(1, round(src_w * scale)), max(1, round(src_h * scale))

    def resize_contain(
            self,
            img: Image,
            width: int,
            height: int,
            background: Optional[RGB] = None,
    ) -> np.ndarray:
        """
        Scale *img* uniformly to fit inside ``width`` x ``height`` and centre
        it on a canvas of that size.

        • background None  →  fully transparent canvas
        • background (r,g,b) → opaque canvas of that colour
        Returns an (height, width, 4) RGBA array.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid target size {width}x{height}")

        new_w, new_h = self._fit_size(img.width, img.height, width, height)
        shrinking = new_w < img.width or new_h < img.height
        resized = self._resize_premultiplied(
            img.pixels, new_w, new_h,
            interpolation=cv2.INTER_AREA if shrinking else cv2.INTER_LINEAR)

        canvas = np.zeros((height, width, 4), dtype=np.uint8)
        if background is not None:
            canvas[..., :3] = background
            canvas[..., 3] = 255

        x0 = (width - new_w) // 2
        y0 = (height - new_h) // 2
        canvas[y0:y0 + new_h, x0:x0 + new_w] = self._compose_rgba(
            resized, canvas[y0:y0 + new_h, x0:x0 + new_w])
        return canvas

    @staticmethod
    def _resize_premultiplied(pixels: np.ndarray, width: int, height: int, interpolation: int) -> np.ndarray:
        """
        Resize straight-alpha RGBA without letting the colour of transparent
        pixels bleed into the edges: interpolate premultiplied values, then
        divide the alpha back out.
        """
        alpha = pixels[..., 3:4].astype("float32") / 255.0
        premult = np.concatenate(
            [pixels[..., :3].astype("float32") * alpha, alpha], axis=-1)

        resized = cv2.resize(premult, (width, height), interpolation=interpolation)
        out_a = np.clip(resized[..., 3:4], 0.0, 1.0)
        safe_a = np.where(out_a > 0, out_a, 1.0)

        out = np.empty((height, width, 4), dtype=np.uint8)
        out[..., :3] = np.clip(np.rint(resized[..., :3] / safe_a), 0, 255).astype("uint8")
        out[..., 3] = np.clip(np.rint(out_a[..., 0] * 255.0), 0, 255).astype("uint8")
        return out

    @staticmethod
    def _compose_rgba(fg: np.ndarray, bg: np.ndarray) -> np.ndarray:
        """Porter-Duff "over" for two straight-alpha RGBA arrays."""
        fa = fg[..., 3:4].astype("float32") / 255.0
        ba = bg[..., 3:4].astype("float32") / 255.0
        out_a = fa + ba * (1.0 - fa)

        premult = fg[..., :3].astype("float32") * fa + bg[..., :3].astype("float32") * ba * (1.0 - fa)
        safe_a = np.where(out_a > 0, out_a, 1.0)
        out_rgb = premult / safe_a

        out = np.empty_like(fg)
        out[..., :3] = np.clip(np.rint(out_rgb), 0, 255).astype("uint8")
        out[..., 3] = np.clip(np.rint(out_a[..., 0] * 255.0), 0, 255).astype("uint8")
        return out

    @staticmethod
    def flatten(pixels: np.ndarray, background: RGB) -> np.ndarray:
        """
        Alpha-blend RGBA onto a solid colour, dropping the alpha channel.
        Returns (H, W, 3) RGB.
        """
        alpha = pixels[..., 3].astype("float32") / 255.0
        alpha = cv2.merge([alpha, alpha, alpha])  # (H,W,3)
        bg = np.empty(pixels.shape[:2] + (3,), dtype="float32")
        bg[...] = background

        blended = pixels[..., :3].astype("float32") * alpha + bg * (1.0 - alpha)
        return np.clip(np.rint(blended), 0, 255).astype("uint8")

    @staticmethod
    def ensure_alpha(pixels: np.ndarray) -> np.ndarray:
        if pixels.ndim == 3 and pixels.shape[2] == 4:
            return pixels
        if pixels.ndim == 2:
            return cv2.cvtColor(pixels, cv2.COLOR_GRAY2RGBA)
        return cv2.cvtColor(pixels, cv2.COLOR_RGB2RGBA)
