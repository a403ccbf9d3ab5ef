"""Точка входа в приложение."""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from dataset_viewer.config.settings import load_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dataset-viewer",
        description="Просмотр набора изображений: средний цвет и среднее изображение по категориям.",
    )
    parser.add_argument("directory", nargs="?", default=None, help="Папка, открываемая при запуске")
    parser.add_argument("--config", default=None, help="JSON-файл настроек")
    parser.add_argument("--log-level", default=None, help="Уровень логирования (DEBUG, INFO, ...)")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Создаёт и запускает главное окно приложения."""
    args = build_parser().parse_args(argv)
    settings = load_settings(args.config)

    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # customtkinter is imported lazily so the CLI parses without a display
    from dataset_viewer.app import DatasetViewerApp

    app = DatasetViewerApp(settings)
    if args.directory:
        app.controller.open_directory(args.directory)
    app.mainloop()


if __name__ == "__main__":
    main()
