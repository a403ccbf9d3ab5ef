from __future__ import annotations

import numpy as np
from PIL import Image

# режимы, где прозрачность или палитру проще раскрыть через RGBA
_VIA_RGBA = ("P", "PA", "LA")


def to_rgb_raster(image: Image.Image) -> np.ndarray:
    """
    Приводит декодированное изображение к растру 8-бит RGB формы (H, W, 3).
    Альфа отбрасывается без премультипликации, RGB/RGBA сохраняют значения каналов.
    """
    width, height = image.size
    if width * height == 0:
        raise ValueError(f"Изображение нулевой площади: {width}x{height}")

    if image.mode in ("RGB", "RGBA"):
        arr = np.asarray(image, dtype=np.uint8)
    elif image.mode in _VIA_RGBA:
        arr = np.asarray(image.convert("RGBA"), dtype=np.uint8)
    else:
        arr = np.asarray(image.convert("RGB"), dtype=np.uint8)
    return np.ascontiguousarray(arr[:, :, :3])


def raster_to_image(raster: np.ndarray) -> Image.Image:
    """
    Оборачивает растр (H, W, 3) uint8 в изображение PIL режима RGB.
    """
    return Image.fromarray(np.ascontiguousarray(raster, dtype=np.uint8))
