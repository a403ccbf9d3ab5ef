"""Контроллер приложения: оркестрация UI и сервисов.

SOLID:
- SRP: класс управляет связями между UI и сервисами (без арифметики над пикселями).
- DIP: зависит от сервисов как от ролей; каталог категорий принадлежит контроллеру
  и передаётся в сервисы явно.
Clean Code:
- Обработчики компактны; тяжёлая логика вынесена в сервисы.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from tkinter import filedialog, TclError
from typing import List, Optional, Tuple

import customtkinter as ctk

from dataset_viewer.models.image_model import AnalysisResult, describe_failures
from dataset_viewer.services.analysis_service import AnalysisService
from dataset_viewer.services.color_space import raster_to_image
from dataset_viewer.services.dataset_service import DatasetCatalog, DatasetService
from dataset_viewer.ui.bottom_bar import BottomBar
from dataset_viewer.ui.color_view import ColorView
from dataset_viewer.ui.image_viewer import ImageViewer
from dataset_viewer.ui.sidebar import Sidebar

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает элементы UI с прикладной логикой.

    Ответственности:
    - Инициализация и бинд событий (UI -> контроллер).
    - Сканирование папки через `DatasetService`.
    - Расчёт среднего цвета и среднего изображения через `AnalysisService`.
    - Синхронизация состояния зума.
    """
    viewer: ImageViewer
    color_view: ColorView
    sidebar: Sidebar
    bottom: BottomBar
    window: ctk.CTk
    dataset_service: DatasetService = field(default_factory=DatasetService)
    analysis_service: AnalysisService = field(default_factory=AnalysisService)

    _catalog: Optional[DatasetCatalog] = None

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами.

        Компоненты UI ничего не знают друг о друге, общаются через контроллер.
        """
        self.sidebar.on_open_folder = self._handle_open_folder
        self.sidebar.on_category_select = self._handle_category_select
        self.sidebar.on_file_select = self._handle_file_select

        self.viewer.on_cursor_move = self._handle_cursor_move
        self.viewer.on_zoom_change = self._handle_viewer_zoom_changed

        self.bottom.on_zoom_change = self._handle_zoom_change
        self.bottom.on_zoom_preset = self._handle_zoom_change
        self.bottom.on_zoom_fit = self._handle_zoom_fit

    def open_directory(self, directory: str | Path) -> None:
        """Сканирует папку и показывает список категорий."""
        try:
            catalog = self.dataset_service.scan_directory(directory)
        except OSError as exc:
            logger.error("Cannot scan %s: %s", directory, exc)
            self.bottom.set_status(str(exc), is_error=True)
            return

        self._catalog = catalog
        self._reset_all()
        self.sidebar.set_folder(str(catalog.directory))
        self.sidebar.set_categories(catalog.category_names())
        logger.info("Opened %s: %d image(s)", catalog.directory, len(catalog))
        self.bottom.set_status(f"Найдено изображений: {len(catalog)}")

    # ---- Handlers ----
    def _handle_open_folder(self) -> None:
        try:
            directory = filedialog.askdirectory(title="Выберите папку с изображениями", mustexist=True)
        except TclError:
            # Silent fail if dialog cannot open
            return
        if not directory:
            return
        self.open_directory(directory)

    def _handle_category_select(self, category: str) -> None:
        if self._catalog is None:
            return
        files = self._catalog.files(category)
        self.sidebar.set_files([path.name for path in files])
        self._update_mean_color_and_image(category, files)

    def _handle_file_select(self, category: str, filename: str) -> None:
        if self._catalog is None:
            return
        files = self._catalog.find_file(category, filename)
        self._update_mean_color_and_image(filename, files)

    def _handle_cursor_move(self, x: Optional[int], y: Optional[int], rgb: Optional[Tuple[int, int, int]]) -> None:
        self.sidebar.update_cursor_info(x, y, rgb)

    def _handle_viewer_zoom_changed(self, zoom_percent: int) -> None:
        # mouse wheel zoom -> sync bottom slider
        self.bottom.set_zoom_percent(zoom_percent)

    def _handle_zoom_change(self, zoom_percent: int) -> None:
        self.viewer.set_zoom_percent(zoom_percent)

    def _handle_zoom_fit(self) -> None:
        self.viewer.set_zoom_to_fit()
        self.bottom.set_zoom_percent(self.viewer.get_zoom_percent())

    # ---- Helpers ----
    def _update_mean_color_and_image(self, selection: str, files: List[Path]) -> None:
        """Считает средний цвет и среднее изображение и выводит их в UI."""
        result: AnalysisResult = self.analysis_service.analyze(files)

        self.color_view.set_color(result.mean_color)
        self.viewer.set_image(None if result.mean_image is None else raster_to_image(result.mean_image))
        self.bottom.set_zoom_percent(self.viewer.get_zoom_percent())
        self.sidebar.set_analysis_info(selection, result, total_files=len(files))

        if result.failures:
            self.bottom.set_status(describe_failures(result.failures), is_error=True)
        else:
            self.bottom.set_status(f"{selection}: {result.rasters_used} изобр.")

    def _reset_all(self) -> None:
        """Очищает списки и панели перед загрузкой новой папки."""
        self.sidebar.set_categories(())
        self.sidebar.set_analysis_info("", None)
        self.viewer.set_image(None)
        self.color_view.set_color(None)
