# main.py
from __future__ import annotations
import argparse
import sys
import logging
from dataclasses import replace

from PySide6.QtWidgets import QApplication, QMessageBox

from app.config import load_settings
from app.errors import ConfigError
from app.state import PracticeController
from services.text_generator import GeneratorKind
from ui.main_window import MainWindow

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Log any uncaught exceptions rather than silently dying
    def excepthook(exctype, value, tb):
        logging.critical("Unhandled exception", exc_info=(exctype, value, tb))
        try:
            QMessageBox.critical(
                None, "Application Error", f"{exctype.__name__}: {value}"
            )
        except Exception:
            logging.debug("Could not show error dialog", exc_info=True)
        sys.exit(1)

    sys.excepthook = excepthook


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Typing practice with live WPM and accuracy.")
    p.add_argument("--config", help="Path to a JSON settings file", default=None)
    p.add_argument(
        "--generator",
        help="Text generator: random-words, sentences or mixed-case",
        default=None,
    )
    p.add_argument("--log-level", default="INFO", help="Logging level (default INFO)")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    settings = load_settings(args.config)
    if args.generator:
        try:
            settings = replace(settings, default_generator=GeneratorKind.parse(args.generator))
        except ConfigError as e:
            logging.warning("%s; keeping %s", e, settings.default_generator.label)

    controller = PracticeController(settings)

    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setApplicationName("Typetutor")
    app.setOrganizationName("Typetutor")

    win = MainWindow(controller)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
