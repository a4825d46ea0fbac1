import logging
import logging.config
import logging.handlers
from pathlib import Path
from typing import Optional

from refbox_overlay.config.settings import (
    LOG_CONFIG_FILE,
    LOG_DIR,
    LOG_FILE_NAME,
    LOG_FORMAT,
    LOG_MAX_BYTES,
)


def configure_logging(config_file: str = LOG_CONFIG_FILE, log_dir: Optional[Path] = LOG_DIR) -> None:
    """Set up the root logger for the viewer.

    A ``logging.conf`` in the working directory wins. Otherwise everything
    at INFO and above goes to the console and to a rotating log file in
    ``log_dir`` (skipped when ``log_dir`` is None).
    """
    if Path(config_file).is_file():
        logging.config.fileConfig(config_file, disable_existing_loggers=False)
        return

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(log_dir / LOG_FILE_NAME, maxBytes=LOG_MAX_BYTES, backupCount=1)
        )

    root = logging.getLogger()
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(logging.INFO)
    logging.captureWarnings(True)
