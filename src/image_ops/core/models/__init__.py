"""Simple data models for AWS resources."""

# Snapshot models
from .snapshot import (
    SnapshotState,
    SnapshotInfo,
)

# AMI models
from .ami import (
    AMIState,
    AMIInfo,
)

# Tag models
from .tags import (
    Tag,
    parse_tags,
    tags_to_dict,
    build_tag_specifications,
)

__all__ = [
    # Snapshot models
    "SnapshotState",
    "SnapshotInfo",
    # AMI models
    "AMIState",
    "AMIInfo",
    # Tag models
    "Tag",
    "parse_tags",
    "tags_to_dict",
    "build_tag_specifications",
]
