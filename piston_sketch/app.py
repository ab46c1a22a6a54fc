# -*- coding: utf-8 -*-
"""Application entry point."""

from __future__ import annotations

import logging
import sys
from PyQt6.QtWidgets import QApplication

from .core.config import AppSettings
from .logging_config import setup_logging
from .ui.main_window import MainWindow


def main():
    # Logging first, so warnings about other settings are not lost.
    setup_logging(getattr(logging, AppSettings.log_level_from_env() or "INFO"))
    settings = AppSettings.from_env()
    app = QApplication(sys.argv)
    app.setApplicationName("Piston Sketch")
    w = MainWindow(settings)
    w.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
