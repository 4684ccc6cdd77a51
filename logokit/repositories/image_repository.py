from pathlib import Path
from typing import Union, Iterable, List, Sequence
import logging
import os
import shutil
import signal
import uuid

import numpy as np
import cv2
from PIL import Image as PILImage
from dotenv import load_dotenv

from ..models.image import Image

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ImageRepository:
    """
    Handles file I/O for Image entities.
    Decoding goes through OpenCV, encoding through Pillow.
    """

    @staticmethod
    def create_image(pixels: np.ndarray, path: PathLike = None) -> Image:
        if path is None:
            return Image(pixels)
        return Image(pixels=pixels, path=Path(path))

    @staticmethod
    def _to_rgba(arr: np.ndarray) -> np.ndarray:
        """OpenCV hands back GRAY / BGR / BGRA in 8 or 16 bit; normalise to RGBA uint8."""
        if arr.dtype == np.uint16:
            arr = (arr >> 8).astype(np.uint8)
        elif arr.dtype != np.uint8:
            raise ValueError(f"Unsupported pixel depth: {arr.dtype}")

        if arr.ndim == 2:
            return cv2.cvtColor(arr, cv2.COLOR_GRAY2RGBA)
        if arr.shape[2] == 3:
            return cv2.cvtColor(arr, cv2.COLOR_BGR2RGBA)
        if arr.shape[2] == 4:
            return cv2.cvtColor(arr, cv2.COLOR_BGRA2RGBA)
        raise ValueError(f"Unsupported channel count: {arr.shape[2]}")

    @classmethod
    def load(cls, path: PathLike, timeout: int = None) -> Image:
        path = Path(path)
        if timeout is None:
            timeout = int(os.getenv("IMAGE_LOAD_TIMEOUT", "5"))

        # ─── timeout wrapper (5 s default) ────────────────────────────────
        def _handler(signum, frame):
            raise TimeoutError(f"cv2.imread timed-out after {timeout}s: {path}")

        previous = signal.signal(signal.SIGALRM, _handler)
        signal.alarm(timeout)
        try:
            arr = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
        finally:
            signal.alarm(0)  # always disarm
            signal.signal(signal.SIGALRM, previous)
        # ──────────────────────────────────────────────────────────────────

        if arr is None:
            raise FileNotFoundError(f"Image not found or unreadable: {path}")

        return Image(pixels=cls._to_rgba(arr), path=path)

    @classmethod
    def load_first(cls, candidates: Sequence[PathLike]) -> Image:
        """
        Load the first candidate that exists on disk.
        A candidate that exists but fails to decode is an error, not a skip.
        """
        for candidate in candidates:
            if Path(candidate).is_file():
                return cls.load(candidate)

        listed = "\n".join(f"  - {c}" for c in candidates)
        raise FileNotFoundError(f"No source image found. Looked for:\n{listed}")

    @staticmethod
    def save(image: Image, **save_kwargs) -> Path:
        """
        Encode ``image`` to ``image.path``. The format is taken from the
        suffix; the file is written next to the target and renamed into place.
        """
        if image.path is None:
            raise ValueError("Image has no destination path")

        path = Path(image.path)
        fmt = PILImage.registered_extensions().get(path.suffix.lower())
        if fmt is None:
            raise ValueError(f"Unsupported output extension: {path.suffix!r}")

        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_name(f".{path.name}.{uuid.uuid4().hex}.tmp")
        try:
            PILImage.fromarray(np.ascontiguousarray(image.pixels)).save(tmp_path, format=fmt, **save_kwargs)
            os.replace(tmp_path, path)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()
        return path

    @staticmethod
    def save_ico(images: List[Image], path: PathLike) -> Path:
        """
        Pack several square RGBA images into one multi-resolution .ico.
        """
        if not images:
            raise ValueError("At least one image is needed to build an ICO file")

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        ordered = sorted(images, key=lambda img: img.width, reverse=True)
        frames = [PILImage.fromarray(np.ascontiguousarray(img.pixels)) for img in ordered]
        sizes = [(img.width, img.height) for img in ordered]

        tmp_path = path.with_name(f".{path.name}.{uuid.uuid4().hex}.tmp")
        try:
            frames[0].save(tmp_path, format="ICO", sizes=sizes, append_images=frames[1:])
            os.replace(tmp_path, path)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()
        return path

    @staticmethod
    def ensure_dir(path: PathLike) -> Path:
        path = Path(path)
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def copy_existing(files: Iterable[PathLike], dest_dir: PathLike) -> List[Path]:
        """Copy every file that exists into ``dest_dir``; missing ones are skipped."""
        dest_dir = Path(dest_dir)
        dest_dir.mkdir(parents=True, exist_ok=True)
        copied = []
        for src in files:
            src = Path(src)
            if not src.is_file():
                logger.debug(f"Not copying missing asset: {src}")
                continue
            dest = dest_dir / src.name
            shutil.copy2(src, dest)
            copied.append(dest)
        return copied
