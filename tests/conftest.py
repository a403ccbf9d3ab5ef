from pathlib import Path

import numpy as np
import pytest
from PIL import Image


def solid_raster(color, width=2, height=2):
    raster = np.empty((height, width, 3), dtype=np.uint8)
    raster[:, :] = color
    return raster


@pytest.fixture
def write_image(tmp_path):
    def _write(name, color=(255, 0, 0), size=(2, 2), mode="RGB") -> Path:
        path = tmp_path / name
        image = Image.new("RGB", size, color)
        if mode == "P":
            # exact single-entry palette; convert("P") would snap to the web palette
            image = Image.new("P", size, 0)
            image.putpalette(list(color) + [0, 0, 0] * 255)
        elif mode != "RGB":
            image = image.convert(mode)
        image.save(path)
        return path

    return _write
