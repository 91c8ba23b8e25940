import logging
from logging.handlers import RotatingFileHandler
from datetime import datetime, timedelta
from pathlib import Path

LOGGER_NAME = "landcalc"


def setup_logger(name=LOGGER_NAME, log_dir=None):
    logger = logging.getLogger(name)
    if logger.handlers: return logger
    logger.setLevel(logging.DEBUG)

    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(message)s', datefmt='%H:%M:%S'))
    logger.addHandler(ch)

    if log_dir is None:
        from landcalc.utils.paths import LOG_DIR
        log_dir = LOG_DIR
    log_file = Path(log_dir) / f"landcalc_{datetime.now().strftime('%Y%m%d')}.log"

    try:
        fh = RotatingFileHandler(log_file, maxBytes=10*1024*1024, backupCount=5, encoding='utf-8')
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s'))
        logger.addHandler(fh)
    except OSError as e:
        logger.error(f"Could not create log file handler: {e}")

    return logger


def get_logger(name=None):
    return logging.getLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)


def cleanup_old_logs(days=30, log_dir=None):
    """Remove dated log files older than `days`."""
    cleanup_logger = get_logger("LogCleanup")
    if log_dir is None:
        from landcalc.utils.paths import LOG_DIR
        log_dir = LOG_DIR
    log_dir = Path(log_dir)
    cutoff_date = datetime.now() - timedelta(days=days)
    removed_count = 0
    if not log_dir.exists():
        return 0

    for log_file in log_dir.glob("landcalc_*.log*"):
        # landcalc_20240101.log, landcalc_20240101.log.1
        file_date_str = log_file.name.replace("landcalc_", "").split(".")[0]
        if not file_date_str.isdigit():
            continue
        try:
            file_date = datetime.strptime(file_date_str, "%Y%m%d")
            if file_date < cutoff_date:
                log_file.unlink()
                removed_count += 1
        except (ValueError, OSError) as e:
            cleanup_logger.debug(f"Skipped {log_file.name}: {e}")
    if removed_count > 0:
        cleanup_logger.info(f"Removed {removed_count} old log file(s)")
    return removed_count
