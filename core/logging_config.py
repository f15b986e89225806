import os
import logging
from logging.handlers import TimedRotatingFileHandler
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] in %(module)s: %(message)s"

_configured = False


def setup_logging(level: str = "INFO", log_dir: Optional[str] = None) -> logging.Logger:
    """Configure the root logger once: console always, rotating files when log_dir is set."""
    global _configured
    root = logging.getLogger()
    if _configured:
        return root
    _configured = True

    formatter = logging.Formatter(LOG_FORMAT)
    root.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    root.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

        app_handler = TimedRotatingFileHandler(
            os.path.join(log_dir, "app.log"), when="midnight", interval=1, backupCount=14,
            encoding="utf-8", delay=True
        )
        app_handler.suffix = "%Y-%m-%d"
        app_handler.setFormatter(formatter)
        app_handler.setLevel(level)
        root.addHandler(app_handler)

        error_handler = TimedRotatingFileHandler(
            os.path.join(log_dir, "error.log"), when="midnight", interval=1, backupCount=30,
            encoding="utf-8", delay=True
        )
        error_handler.suffix = "%Y-%m-%d"
        error_handler.setFormatter(formatter)
        error_handler.setLevel(logging.ERROR)
        root.addHandler(error_handler)

    root.info("Logging initialized (level=%s, log_dir=%s)", level, log_dir or "-")
    return root
