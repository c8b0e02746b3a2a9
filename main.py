import logging
import sys

from PyQt6.QtWidgets import QApplication

from config import configure_logging, get_settings
from views.main_window import MainWindow

logger = logging.getLogger(__name__)


def main():
    settings = get_settings()
    configure_logging(settings.log_level)
    app = QApplication(sys.argv)
    # load QSS stylesheet
    try:
        with open(settings.stylesheet, "r", encoding="utf-8") as f:
            app.setStyleSheet(f.read())
    except FileNotFoundError:
        logger.info("No stylesheet at %s", settings.stylesheet)

    window = MainWindow(settings=settings)
    window.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
