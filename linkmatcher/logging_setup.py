import logging
from pathlib import Path

from .config import LogsConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _attach_file_logging(log_path: Path, level: str) -> None:
    logger = logging.getLogger()

    for h in logger.handlers:
        if isinstance(h, logging.FileHandler):
            if Path(getattr(h, "baseFilename", "")) == log_path:
                return

    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(getattr(logging, level.upper(), logging.INFO))
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(file_handler)


def configure_logging(config: LogsConfig) -> None:
    """Set the root log level and format, optionally mirroring to a file."""
    level = getattr(logging, config.log_level.upper())
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    logging.getLogger().setLevel(level)

    if config.log_file:
        _attach_file_logging(Path(config.log_file).resolve(), config.log_level)
