"""Core image operations module."""

from .models import (
    AMIInfo,
    AMIState,
    SnapshotInfo,
    SnapshotState,
    Tag,
    parse_tags,
    build_tag_specifications,
)
from .constants import (
    DEFAULT_POLL_INTERVAL,
    RESOURCE_TYPE_IMAGE,
    RESOURCE_TYPE_SNAPSHOT,
)

__all__ = [
    # Models
    "AMIInfo",
    "SnapshotInfo",
    "Tag",
    "parse_tags",
    "build_tag_specifications",
    # Enums
    "AMIState",
    "SnapshotState",
    # Constants
    "DEFAULT_POLL_INTERVAL",
    "RESOURCE_TYPE_IMAGE",
    "RESOURCE_TYPE_SNAPSHOT",
]
