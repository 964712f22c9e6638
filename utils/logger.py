# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(log_dir="data/logs", level=logging.INFO, console=True):
    """
    Configure the "pricing" logger for the application that embeds the
    pricing functions. Every pricing module logs under it (pricing.subtotal,
    pricing.discounts, pricing.tax, pricing.delivery, pricing.checkout,
    pricing.config); the modules themselves never attach handlers.

    - log_dir: folder for pricing.log, rotated at midnight with a week of
      backups. None skips the file, for hosts with no writable disk.
    - level: applied on every call, so a host can turn DEBUG amounts on
      or off later without duplicating handlers.
    - console: also echo to stderr.
    """
    logger = logging.getLogger("pricing")
    logger.setLevel(level)

    # Handlers are attached once; later calls only change the level
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = []

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(TimedRotatingFileHandler(
            filename=log_dir / "pricing.log",
            when="midnight",
            backupCount=7,
            encoding="utf-8"
        ))
    if console:
        handlers.append(logging.StreamHandler())

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Pricing logger ready (file={'off' if log_dir is None else log_dir}, "
                f"level={logging.getLevelName(level)})")
    return logger
