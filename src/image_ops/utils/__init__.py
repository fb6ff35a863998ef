# utils/__init__.py

from .exceptions import (
    ImageOpsError,
    CLIError,
    TagParseError,
    AWSOperationError,
    ImageNotFoundError,
    SnapshotNotFoundError,
    ImageCreationError,
    SnapshotFailedError,
    UnexpectedSnapshotStateError,
    PollTimeoutError,
)
from .logger import setup_logger
from .config import ConfigManager
from .session import SessionManager, assume_role

__all__ = [
    "ImageOpsError",
    "CLIError",
    "TagParseError",
    "AWSOperationError",
    "ImageNotFoundError",
    "SnapshotNotFoundError",
    "ImageCreationError",
    "SnapshotFailedError",
    "UnexpectedSnapshotStateError",
    "PollTimeoutError",
    "setup_logger",
    "ConfigManager",
    "SessionManager",
    "assume_role",
]
