"""Боковая панель: открытие папки, списки категорий и файлов, информация о выборке.

Принципы:
- SRP: управляет только UI списков и подписей, не содержит вычислений.
- ISP: выдаёт выбор через события `on_*`, состояние принимает методами `set_*`.
"""
from __future__ import annotations

import tkinter as tk
from typing import Callable, List, Optional, Sequence, Tuple

import customtkinter as ctk

from dataset_viewer.models.image_model import AnalysisResult
from dataset_viewer.ui.color_view import rgb_to_hex


class Sidebar(ctk.CTkFrame):
    """Панель с блоками: папка, категории, файлы, информация, курсор."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=300, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_open_folder: Optional[Callable[[], None]] = None
        self.on_category_select: Optional[Callable[[str], None]] = None
        self.on_file_select: Optional[Callable[[str, str], None]] = None

        self._title = ctk.CTkLabel(self, text="Набор данных", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._open_btn = ctk.CTkButton(self, text="Открыть папку…", command=self._emit_open_folder)
        self._open_btn.grid(row=1, column=0, padx=8, pady=(0, 4), sticky="ew")

        self._folder_val = ctk.StringVar(value="—")
        self._folder_label = ctk.CTkLabel(self, textvariable=self._folder_val, wraplength=270, anchor="w", justify="left")
        self._folder_label.grid(row=2, column=0, padx=8, pady=(0, 8), sticky="ew")

        # Categories
        self._cat_title = ctk.CTkLabel(self, text="Категория", font=ctk.CTkFont(size=14, weight="bold"))
        self._cat_title.grid(row=3, column=0, padx=8, pady=(4, 2), sticky="w")
        self._category_list = self._make_listbox(row=4)
        self._category_list.bind("<<ListboxSelect>>", self._on_category_list_change)
        self.grid_rowconfigure(4, weight=1)

        # Files
        self._files_title = ctk.CTkLabel(self, text="Файлы", font=ctk.CTkFont(size=14, weight="bold"))
        self._files_title.grid(row=5, column=0, padx=8, pady=(8, 2), sticky="w")
        self._file_list = self._make_listbox(row=6)
        self._file_list.bind("<<ListboxSelect>>", self._on_file_list_change)
        self.grid_rowconfigure(6, weight=2)

        # Info section
        self._info_title = ctk.CTkLabel(self, text="Информация", font=ctk.CTkFont(size=14, weight="bold"))
        self._info_title.grid(row=7, column=0, padx=8, pady=(8, 2), sticky="w")

        self._selection_val = ctk.StringVar(value="—")
        self._used_val = ctk.StringVar(value="—")
        self._color_val = ctk.StringVar(value="—")
        self._dims_val = ctk.StringVar(value="—")
        for row, var in enumerate((self._selection_val, self._used_val, self._color_val, self._dims_val), start=8):
            label = ctk.CTkLabel(self, textvariable=var, wraplength=270, anchor="w", justify="left")
            label.grid(row=row, column=0, padx=8, pady=(0, 2), sticky="ew")

        # Cursor section
        self._cursor_title = ctk.CTkLabel(self, text="Курсор", font=ctk.CTkFont(size=14, weight="bold"))
        self._cursor_title.grid(row=12, column=0, padx=8, pady=(8, 2), sticky="w")
        self._cursor_xy_val = ctk.StringVar(value="—")
        self._cursor_rgb_val = ctk.StringVar(value="—")
        self._cursor_xy = ctk.CTkLabel(self, textvariable=self._cursor_xy_val, anchor="w", justify="left")
        self._cursor_rgb = ctk.CTkLabel(self, textvariable=self._cursor_rgb_val, anchor="w", justify="left")
        self._cursor_xy.grid(row=13, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._cursor_rgb.grid(row=14, column=0, padx=8, pady=(0, 8), sticky="ew")

    # ---- Public API ----
    def set_folder(self, folder: str) -> None:
        self._folder_val.set(folder)

    def set_categories(self, names: Sequence[str]) -> None:
        self._fill(self._category_list, names)
        self._fill(self._file_list, ())

    def set_files(self, filenames: Sequence[str]) -> None:
        self._fill(self._file_list, filenames)

    def set_analysis_info(self, selection: str, result: Optional[AnalysisResult], total_files: int = 0) -> None:
        """Показывает сводку по последнему анализу (None — сбросить)."""
        if result is None:
            for var in (self._selection_val, self._used_val, self._color_val, self._dims_val):
                var.set("—")
            return
        self._selection_val.set(f"Выбрано: {selection}")
        self._used_val.set(f"Изображений: {result.rasters_used} из {total_files}")
        rgb = result.mean_color
        self._color_val.set(f"Средний цвет: {rgb[0]}, {rgb[1]}, {rgb[2]} ({rgb_to_hex(rgb)})")
        if result.mean_image is None:
            self._dims_val.set("Среднее изображение: нет")
        else:
            h, w = result.mean_image.shape[:2]
            self._dims_val.set(f"Среднее изображение: {w} × {h}")

    def update_cursor_info(self, x: Optional[int], y: Optional[int], rgb: Optional[Tuple[int, int, int]]) -> None:
        if x is None or y is None or rgb is None:
            self._cursor_xy_val.set("—")
            self._cursor_rgb_val.set("—")
            return
        self._cursor_xy_val.set(f"X: {x}, Y: {y}")
        self._cursor_rgb_val.set(f"RGB: {rgb[0]}, {rgb[1]}, {rgb[2]}  {rgb_to_hex(rgb)}")

    # ---- Internals ----
    def _make_listbox(self, row: int) -> tk.Listbox:
        frame = ctk.CTkFrame(self)
        frame.grid(row=row, column=0, padx=8, pady=(0, 4), sticky="nsew")
        frame.grid_rowconfigure(0, weight=1)
        frame.grid_columnconfigure(0, weight=1)
        # exportselection=False: both lists keep their selection at the same time
        listbox = tk.Listbox(frame, selectmode=tk.SINGLE, exportselection=False, height=8, activestyle="none")
        listbox.grid(row=0, column=0, sticky="nsew")
        scrollbar = ctk.CTkScrollbar(frame, command=listbox.yview)
        scrollbar.grid(row=0, column=1, sticky="ns")
        listbox.configure(yscrollcommand=scrollbar.set)
        return listbox

    @staticmethod
    def _fill(listbox: tk.Listbox, items: Sequence[str]) -> None:
        listbox.delete(0, tk.END)
        for item in items:
            listbox.insert(tk.END, item)

    @staticmethod
    def _selected(listbox: tk.Listbox) -> Optional[str]:
        selection: List[int] = list(listbox.curselection())
        if not selection:
            return None
        return listbox.get(selection[0])

    def _emit_open_folder(self) -> None:
        if self.on_open_folder:
            self.on_open_folder()

    def _on_category_list_change(self, _event: tk.Event) -> None:
        name = self._selected(self._category_list)
        if name is not None and self.on_category_select:
            self.on_category_select(name)

    def _on_file_list_change(self, _event: tk.Event) -> None:
        category = self._selected(self._category_list)
        filename = self._selected(self._file_list)
        if category is not None and filename is not None and self.on_file_select:
            self.on_file_select(category, filename)
