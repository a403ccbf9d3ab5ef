"""Модели данных для изображений и результатов усреднения.

Принципы:
- SRP: только структуры данных и их краткое текстовое описание, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import numpy as np
from PIL import Image

RGB = Tuple[int, int, int]

# Color.PINK: «нет изображений»
MEAN_COLOR_SENTINEL: RGB = (255, 175, 175)


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель декодированного изображения и его метаданные.

    Fields:
        path: Путь к исходному файлу.
        pil_image: Загруженное изображение PIL (в исходном режиме).
        width: Ширина, px.
        height: Высота, px.
        mode: Режим PIL исходного файла, например "P" или "RGBA".
        size_bytes: Размер файла, если доступен.
    """
    path: Path
    pil_image: Image.Image
    width: int
    height: int
    mode: str
    size_bytes: Optional[int]


@dataclass(frozen=True)
class ComputationFailure:
    """Структурированная ошибка вычисления для UI.

    Fields:
        kind: "decode_failure" | "empty_input" | "dimension_mismatch".
        path: Файл, вызвавший ошибку (если известен).
        message: Человекочитаемое описание.
    """
    kind: str
    path: Optional[Path]
    message: str


@dataclass
class AnalysisResult:
    """Результат анализа набора файлов: средний цвет и среднее изображение."""
    mean_color: RGB
    mean_image: Optional[np.ndarray]
    rasters_used: int = 0
    failures: List[ComputationFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


_FAILURE_TITLES = {
    "decode_failure": "не декодирован",
    "empty_input": "нет изображений",
    "dimension_mismatch": "разный размер",
}


def describe_failures(failures: Sequence[ComputationFailure]) -> str:
    """Короткая сводка ошибок для строки статуса."""
    parts = []
    for failure in failures:
        title = _FAILURE_TITLES.get(failure.kind, failure.kind)
        parts.append(f"{failure.path.name}: {title}" if failure.path is not None else title)
    return "; ".join(parts)
