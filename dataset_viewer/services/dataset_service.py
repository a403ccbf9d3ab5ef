"""Сканирование папки и группировка изображений по префиксу имени файла.

Принципы:
- SRP: только файловая система и категоризация, без декодирования.
- Каталог принадлежит вызывающему коду и передаётся явно, глобального состояния нет.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".jpg", ".jpeg", ".png")


@dataclass
class DatasetCatalog:
    """Категории изображений одной папки.

    Fields:
        directory: Просканированная папка.
        categories: Имя категории -> файлы в порядке имён.
        all_category: Имя синтетической категории со всеми файлами.
    """
    directory: Path
    categories: Dict[str, List[Path]] = field(default_factory=dict)
    all_category: str = "All"

    def category_names(self) -> List[str]:
        # префикс, совпавший с именем "All", поглощается синтетической категорией
        return [self.all_category] + sorted(name for name in self.categories if name != self.all_category)

    def files(self, category: str) -> List[Path]:
        if category == self.all_category:
            return [path for name in sorted(self.categories) for path in self.categories[name]]
        return list(self.categories[category])

    def find_file(self, category: str, filename: str) -> List[Path]:
        return [path for path in self.files(category) if path.name == filename]

    def __len__(self) -> int:
        return sum(len(files) for files in self.categories.values())


class DatasetService:
    def __init__(
        self,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        separator: str = "_",
        all_category: str = "All",
    ) -> None:
        self._extensions = tuple(ext.lower() for ext in extensions)
        self._separator = separator
        self._all_category = all_category

    def category_of(self, filename: str) -> str:
        """Префикс имени до первого разделителя; без разделителя — имя целиком."""
        return filename.split(self._separator, 1)[0]

    def scan_directory(self, directory: str | Path) -> DatasetCatalog:
        """Находит изображения в папке (без вложенных) и раскладывает их по категориям.

        Raises:
            NotADirectoryError: если путь не существует или не является папкой.
        """
        root = Path(directory)
        if not root.is_dir():
            raise NotADirectoryError(f"Папка не найдена: {root}")

        catalog = DatasetCatalog(directory=root, all_category=self._all_category)
        files = sorted(
            (p for p in root.iterdir() if p.is_file() and p.suffix.lower() in self._extensions),
            key=lambda p: p.name,
        )
        for path in files:
            catalog.categories.setdefault(self.category_of(path.name), []).append(path)

        logger.debug("Scanned %s: %d file(s) in %d categories", root, len(files), len(catalog.categories))
        return catalog
