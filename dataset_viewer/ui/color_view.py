from __future__ import annotations

from typing import Optional, Tuple

import customtkinter as ctk


def rgb_to_hex(rgb: Tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f"#{r:02X}{g:02X}{b:02X}"


class ColorView(ctk.CTkFrame):
    """Панель, целиком залитая средним цветом, с подписью HEX."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, corner_radius=6, **kwargs)
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._swatch = ctk.CTkFrame(self, corner_radius=4, fg_color="#FFFFFF")
        self._swatch.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="nsew")
        self._caption = ctk.StringVar(value="—")
        self._caption_label = ctk.CTkLabel(self, textvariable=self._caption, anchor="center")
        self._caption_label.grid(row=1, column=0, padx=8, pady=(0, 8), sticky="ew")

    def set_color(self, rgb: Optional[Tuple[int, int, int]]) -> None:
        """Заливает панель цветом; None — белый фон без подписи."""
        if rgb is None:
            self._swatch.configure(fg_color="#FFFFFF")
            self._caption.set("—")
            return
        hex_value = rgb_to_hex(rgb)
        self._swatch.configure(fg_color=hex_value)
        self._caption.set(f"RGB {rgb[0]}, {rgb[1]}, {rgb[2]}  ·  {hex_value}")
