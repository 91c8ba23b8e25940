import sys
import traceback
from PyQt6.QtWidgets import QApplication

from landcalc.utils.logger import setup_logger, cleanup_old_logs
from landcalc.utils.helpers import DateTimeHelper
from landcalc.utils.paths import ensure_directories
from landcalc.config import APP_TITLE, BASE_DIR, DATA_DIR, LOG_DIR, SETTINGS_PATH


def main():
    """Application entry point."""
    ensure_directories()

    logger = setup_logger(log_dir=LOG_DIR)
    cleanup_old_logs(log_dir=LOG_DIR)

    logger.info("=" * 60)
    logger.info(f"  {APP_TITLE}")
    logger.info("=" * 60)
    logger.info(f"Started: {DateTimeHelper.now_string()}")
    logger.info(f"Base directory: {BASE_DIR}")
    logger.info(f"Data directory: {DATA_DIR}")
    logger.info(f"Settings file: {SETTINGS_PATH}")

    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    try:
        from landcalc.ui.app import LandCalculatorApp
        logger.info("Creating main window...")
        window = LandCalculatorApp()
        window.show()
        logger.info("Main window shown")
    except Exception as e:
        logger.critical(f"Failed to create main window: {e}")
        logger.critical(traceback.format_exc())
        sys.exit(1)

    code = app.exec()
    logger.info(f"=== Exit (code: {code}) ===")
    sys.exit(code)


if __name__ == "__main__":
    main()
