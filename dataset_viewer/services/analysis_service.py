"""Оркестрация анализа: файлы -> декодирование -> нормализация -> усреднение.

Принципы:
- SRP: собирает набор растров и переводит ошибки движка в структурированный результат.
- DIP: декодер передаётся снаружи (по умолчанию `ImageService.load_image`),
  его можно заменить, не трогая движок усреднения.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple

import numpy as np

from dataset_viewer.models.errors import DecodeFailure, DimensionMismatchError, EmptyInputError
from dataset_viewer.models.image_model import AnalysisResult, ComputationFailure, ImageData
from dataset_viewer.services.color_space import to_rgb_raster
from dataset_viewer.services.image_service import ImageService
from dataset_viewer.services.mean_service import MeanService

logger = logging.getLogger(__name__)

Decoder = Callable[[Path], ImageData]


class AnalysisService:
    def __init__(self, mean_service: Optional[MeanService] = None, decoder: Optional[Decoder] = None) -> None:
        self._mean_service = mean_service or MeanService()
        self._decoder: Decoder = decoder or ImageService().load_image

    def analyze(self, paths: Iterable[str | Path]) -> AnalysisResult:
        """Считает средний цвет и среднее изображение для набора файлов.

        Файлы, которые не удалось декодировать, исключаются и попадают в `failures`;
        ошибки среднего изображения тоже возвращаются как `failures`, а не исключения.

        Args:
            paths: Упорядоченные пути к файлам (порядок категории или один файл).

        Returns:
            `AnalysisResult` со средним цветом (или заглушкой), средним изображением (или None)
            и списком ошибок.
        """
        rasters, sources, failures = self.load_rasters(paths)

        mean_color = self._mean_service.mean_color(rasters)
        mean_image: Optional[np.ndarray] = None
        try:
            mean_image = self._mean_service.mean_image(rasters)
        except EmptyInputError as exc:
            logger.warning("Mean image skipped: %s", exc)
            failures.append(ComputationFailure(kind=exc.kind, path=None, message=str(exc)))
        except DimensionMismatchError as exc:
            offending = sources[exc.index]
            logger.warning("Mean image skipped, %s: %s", offending, exc)
            failures.append(ComputationFailure(kind=exc.kind, path=offending, message=str(exc)))

        logger.info(
            "Analyzed %d raster(s): mean color %s, %d failure(s)", len(rasters), mean_color, len(failures)
        )
        return AnalysisResult(
            mean_color=mean_color,
            mean_image=mean_image,
            rasters_used=len(rasters),
            failures=failures,
        )

    def load_rasters(self, paths: Iterable[str | Path]) -> Tuple[List[np.ndarray], List[Path], List[ComputationFailure]]:
        """Декодирует и нормализует файлы, сохраняя порядок; сбойные файлы пропускаются."""
        rasters: List[np.ndarray] = []
        sources: List[Path] = []
        failures: List[ComputationFailure] = []
        for raw_path in paths:
            path = Path(raw_path)
            try:
                rasters.append(self._decode(path))
            except DecodeFailure as exc:
                logger.warning("%s", exc)
                failures.append(ComputationFailure(kind=exc.kind, path=path, message=str(exc)))
                continue
            sources.append(path)
        return rasters, sources, failures

    def _decode(self, path: Path) -> np.ndarray:
        try:
            image_data = self._decoder(path)
            return to_rgb_raster(image_data.pil_image)
        except (FileNotFoundError, ValueError) as exc:
            raise DecodeFailure(path, str(exc)) from exc
