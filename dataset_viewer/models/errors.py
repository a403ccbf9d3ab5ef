"""Ошибки движка усреднения.

Каждое исключение несёт `kind`, совпадающий с `ComputationFailure.kind`,
чтобы сервис анализа мог вернуть его в UI как структурированный результат.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple


class MeanEngineError(Exception):
    kind: str = "engine_error"


class EmptyInputError(MeanEngineError):
    """Среднее изображение запрошено для пустого набора растров."""
    kind = "empty_input"

    def __init__(self, message: str = "Нет изображений для усреднения") -> None:
        super().__init__(message)


class DimensionMismatchError(MeanEngineError):
    """Растр набора не совпадает по размеру с первым растром.

    Fields:
        index: Позиция растра в наборе.
        expected: (H, W) первого растра.
        actual: (H, W) растра `index`.
    """
    kind = "dimension_mismatch"

    def __init__(self, index: int, expected: Tuple[int, int], actual: Tuple[int, int]) -> None:
        self.index = index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Растр #{index}: размер {actual[1]}x{actual[0]} не совпадает с {expected[1]}x{expected[0]}"
        )


class DecodeFailure(MeanEngineError):
    """Файл не удалось декодировать в растр."""
    kind = "decode_failure"

    def __init__(self, path: Optional[Path], reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Не удалось декодировать {path}: {reason}")
