"""Движок усреднения: средний цвет и среднее изображение набора растров.

Принципы:
- SRP: только арифметика над растрами; декодирование и файлы вне сервиса.
- Чистый код: без внутреннего изменяемого состояния, вызовы можно повторять.

Растр: `np.ndarray` формы (H, W, 3), uint8, построчный порядок пикселей.
"""
from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from dataset_viewer.models.errors import DimensionMismatchError, EmptyInputError
from dataset_viewer.models.image_model import MEAN_COLOR_SENTINEL, RGB

logger = logging.getLogger(__name__)

MEAN_COLOR_MODES = ("last", "aggregate")


def clamp_channel(value: int) -> int:
    """Ограничивает значение канала диапазоном [0, 255]."""
    fixed = min(255, max(0, int(value)))
    if fixed != value:
        logger.warning("Channel value %d out of range, clamped to %d", value, fixed)
    return fixed


def clamp_channels(values: np.ndarray) -> np.ndarray:
    """
    Векторная версия `clamp_channel`: возвращает uint8-массив той же формы.
    """
    out_of_range = int(np.count_nonzero((values < 0) | (values > 255)))
    if out_of_range:
        logger.warning("%d channel values out of range, clamped to [0, 255]", out_of_range)
    return np.clip(values, 0, 255).astype(np.uint8)


def _pixels(raster: np.ndarray) -> np.ndarray:
    return raster.reshape(-1, 3)


class MeanService:
    """Средний цвет и среднее изображение.

    Args:
        mean_color_mode: "last" — результат равен среднему последнего растра набора
            (поведение исходной программы); "aggregate" — среднее по всем пикселям всех растров.
        require_equal_dimensions: True — все растры обязаны совпадать по (H, W) с первым;
            False — растры читаются по линейному индексу пикселя, как в исходной программе,
            и отвергаются только растры с меньшим числом пикселей.
    """

    def __init__(self, mean_color_mode: str = "last", require_equal_dimensions: bool = True) -> None:
        if mean_color_mode not in MEAN_COLOR_MODES:
            raise ValueError(f"Неизвестный режим среднего цвета: {mean_color_mode!r}")
        self.mean_color_mode = mean_color_mode
        self.require_equal_dimensions = require_equal_dimensions

    # ---------- Средний цвет ----------
    def mean_color(self, rasters: Sequence[np.ndarray]) -> RGB:
        """
        Средний цвет набора. Для пустого набора — `MEAN_COLOR_SENTINEL`.
        Деление целочисленное, без округления.
        """
        if len(rasters) == 0:
            return MEAN_COLOR_SENTINEL
        if self.mean_color_mode == "aggregate":
            return self._aggregate_mean_color(rasters)

        # каждый растр перезаписывает результат: побеждает последний
        result: RGB = MEAN_COLOR_SENTINEL
        for index, raster in enumerate(rasters):
            result = self.raster_mean(raster)
            logger.debug("Raster #%d mean color: %s", index, result)
        return result

    def raster_mean(self, raster: np.ndarray) -> RGB:
        """Среднее по каналам одного растра."""
        pixels = _pixels(raster)
        sums = pixels.sum(axis=0, dtype=np.int64)
        count = pixels.shape[0]
        r, g, b = (int(s) // count for s in sums)
        return r, g, b

    def _aggregate_mean_color(self, rasters: Sequence[np.ndarray]) -> RGB:
        sums = np.zeros(3, dtype=np.int64)
        count = 0
        for raster in rasters:
            pixels = _pixels(raster)
            sums += pixels.sum(axis=0, dtype=np.int64)
            count += pixels.shape[0]
        r, g, b = (int(s) // count for s in sums)
        return r, g, b

    # ---------- Среднее изображение ----------
    def mean_image(self, rasters: Sequence[np.ndarray]) -> np.ndarray:
        """
        Попиксельное среднее набора: сумма каналов по N растрам, целочисленно / N,
        затем ограничение [0, 255]. Размер результата — размер первого растра.

        Raises:
            EmptyInputError: набор пуст.
            DimensionMismatchError: растр не совпадает по размеру с первым.
        """
        if len(rasters) == 0:
            raise EmptyInputError()
        first = rasters[0]
        height, width = first.shape[:2]
        n_pixels = height * width
        self._check_dimensions(rasters)

        acc = np.zeros((n_pixels, 3), dtype=np.int64)
        for raster in rasters:
            acc += _pixels(raster)[:n_pixels]
        mean = acc // len(rasters)
        return clamp_channels(mean).reshape(height, width, 3)

    def _check_dimensions(self, rasters: Sequence[np.ndarray]) -> None:
        expected = tuple(rasters[0].shape[:2])
        n_pixels = expected[0] * expected[1]
        for index, raster in enumerate(rasters[1:], start=1):
            actual = tuple(raster.shape[:2])
            if self.require_equal_dimensions:
                if actual != expected:
                    raise DimensionMismatchError(index, expected, actual)
            elif actual[0] * actual[1] < n_pixels:
                raise DimensionMismatchError(index, expected, actual)
