from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int = logging.INFO,
    log_file_path: str | None = None,
) -> None:
    """
    Configure logging to stderr and optionally to a file.

    stdout is left to the generated passwords.

    Args:
        level: Log level for the passgen loggers
        log_file_path: Also write log records to this file when given
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    # Keep third-party packages (Qt plugins etc.) at WARNING
    root_logger.setLevel(logging.WARNING)
    logging.getLogger("passgen").setLevel(level)

    stderr_handler = logging.StreamHandler()
    stderr_handler.setLevel(logging.DEBUG)
    stderr_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(stderr_handler)

    if log_file_path:
        try:
            Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)

            # Rotating file handler (max 1MB, keep 3 files)
            file_handler = logging.handlers.RotatingFileHandler(
                log_file_path,
                maxBytes=1024 * 1024,
                backupCount=3,
                encoding="utf-8",
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root_logger.addHandler(file_handler)
        except OSError as e:
            logging.getLogger(__name__).error(
                "Cannot log to %s, continuing on stderr only: %s", log_file_path, e
            )
