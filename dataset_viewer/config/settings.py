"""Настройки приложения: значения по умолчанию и загрузка из JSON-файла.

Пример файла:

    {
        "extensions": [".png", ".jpg"],
        "mean_color_mode": "aggregate",
        "log_level": "DEBUG"
    }
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional, Tuple

from dataset_viewer.services.dataset_service import DEFAULT_EXTENSIONS
from dataset_viewer.services.mean_service import MEAN_COLOR_MODES

_APPEARANCE_MODES = ("system", "light", "dark")
# темы, встроенные в customtkinter
_BUILTIN_THEMES = ("blue", "green", "dark-blue")


@dataclass(frozen=True)
class ViewerSettings:
    """Неизменяемый набор настроек.

    Fields:
        extensions: Расширения файлов, попадающих в каталог.
        category_separator: Разделитель префикса категории в имени файла.
        all_category: Имя синтетической категории со всеми файлами.
        mean_color_mode: "last" | "aggregate", см. `MeanService`.
        require_equal_dimensions: Строгая проверка размеров для среднего изображения.
        appearance_mode: Тема customtkinter: "system" | "light" | "dark".
        color_theme: Цветовая схема customtkinter.
        log_level: Уровень логирования.
    """
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    category_separator: str = "_"
    all_category: str = "All"
    mean_color_mode: str = "last"
    require_equal_dimensions: bool = True
    appearance_mode: str = "system"
    color_theme: str = "blue"
    log_level: str = "INFO"


def load_config(path: str | Path) -> dict[str, Any]:
    """Читает JSON-файл настроек в словарь.

    Raises:
        ValueError: если расширение не .json или верхний уровень не объект.
    """
    config_path = Path(path)
    suffix = config_path.suffix.lower()
    if suffix != ".json":
        raise ValueError(f"Неподдерживаемый формат настроек: {suffix!r} ({config_path}); ожидается .json")

    with config_path.open("r", encoding="utf-8") as f:
        data = json.load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Настройки должны быть объектом верхнего уровня, получено {type(data).__name__} из {config_path}"
        )
    return dict(data)


def load_settings(path: Optional[str | Path] = None) -> ViewerSettings:
    """Возвращает настройки по умолчанию, переопределённые значениями из файла."""
    settings = ViewerSettings()
    if path is None:
        return settings

    data = load_config(path)
    known = {f.name for f in fields(ViewerSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Неизвестные ключи настроек: {', '.join(unknown)}")

    if "extensions" in data:
        extensions = data["extensions"]
        if not isinstance(extensions, (list, tuple)) or not all(isinstance(ext, str) for ext in extensions):
            raise ValueError("extensions: ожидается список строк")
        data["extensions"] = tuple(_normalize_extension(ext) for ext in extensions)
    settings = replace(settings, **data)
    _validate(settings)
    return settings


def _normalize_extension(ext: str) -> str:
    ext = ext.lower()
    return ext if ext.startswith(".") else f".{ext}"


def _validate(settings: ViewerSettings) -> None:
    if not settings.extensions:
        raise ValueError("Список расширений пуст")
    for name in ("category_separator", "all_category", "color_theme", "log_level"):
        if not isinstance(getattr(settings, name), str):
            raise ValueError(f"{name}: ожидается строка")
    if not settings.category_separator:
        raise ValueError("Разделитель категории не может быть пустым")
    if settings.mean_color_mode not in MEAN_COLOR_MODES:
        raise ValueError(f"mean_color_mode: ожидается одно из {MEAN_COLOR_MODES}, получено {settings.mean_color_mode!r}")
    if not isinstance(settings.require_equal_dimensions, bool):
        raise ValueError("require_equal_dimensions должен быть true/false")
    if settings.appearance_mode not in _APPEARANCE_MODES:
        raise ValueError(f"appearance_mode: ожидается одно из {_APPEARANCE_MODES}")
    if settings.color_theme not in _BUILTIN_THEMES and not Path(settings.color_theme).is_file():
        raise ValueError(f"color_theme: ожидается одно из {_BUILTIN_THEMES} или путь к JSON-теме")
    if not isinstance(logging.getLevelName(settings.log_level.upper()), int):
        raise ValueError(f"Неизвестный уровень логирования: {settings.log_level!r}")
