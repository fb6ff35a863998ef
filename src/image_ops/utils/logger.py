# utils/logger.py
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from .exceptions import CLIError


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its logging constant."""
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise CLIError(f"invalid log level: {level}")
    return value


def setup_logger(
    name: str,
    log_file: Optional[str] = None,
    level: str = "INFO",
    log_dir: str = "logs",
    enable_rotation: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> logging.Logger:
    """Setup logger with console and rotating file handlers.

    Console output goes to stderr; stdout is reserved for the JSON record.
    Calling this again for an existing logger only updates its level.
    Raises CLIError for an unknown level name.
    """
    logger = logging.getLogger(name)
    logger.setLevel(resolve_level(level))

    # Prevent duplicate handlers
    if not logger.handlers:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

        if log_file:
            log_path = Path(log_dir) / log_file

            try:
                log_path.parent.mkdir(parents=True, exist_ok=True)
                if enable_rotation:
                    file_handler = logging.handlers.RotatingFileHandler(
                        log_path,
                        maxBytes=max_bytes,
                        backupCount=backup_count,
                        encoding="utf-8",
                    )
                else:
                    file_handler = logging.FileHandler(log_path, encoding="utf-8")

                file_handler.setFormatter(formatter)
                file_handler.setLevel(logging.DEBUG)  # All levels to file
                logger.addHandler(file_handler)

            except OSError as e:
                logger.warning(
                    f"Failed to create log file {log_path}: {e}. Logging to console only."
                )

        # Records stay on this logger's own handlers
        logger.propagate = False

    return logger
