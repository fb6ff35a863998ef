"""Simple data models for AWS EBS snapshot management."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any

from .tags import tags_to_dict


class SnapshotState(Enum):
    """EBS Snapshot states."""
    PENDING = "pending"
    COMPLETED = "completed"
    ERROR = "error"
    RECOVERABLE = "recoverable"
    RECOVERING = "recovering"


@dataclass
class SnapshotInfo:
    """Simple snapshot information model."""
    snapshot_id: str
    state: str
    volume_id: str = ""
    volume_size: int = 0
    progress: str = ""
    description: str = ""
    encrypted: bool = False
    tags: Dict[str, str] = field(default_factory=dict)

    @property
    def is_pending(self) -> bool:
        return self.state == SnapshotState.PENDING.value

    @property
    def is_completed(self) -> bool:
        return self.state == SnapshotState.COMPLETED.value

    @property
    def is_failed(self) -> bool:
        return self.state == SnapshotState.ERROR.value

    def get_tag(self, key: str, default: str = "") -> str:
        return self.tags.get(key, default)

    @classmethod
    def from_aws_snapshot(cls, snapshot: Dict[str, Any]) -> "SnapshotInfo":
        """Create SnapshotInfo from AWS snapshot data."""
        return cls(
            snapshot_id=snapshot["SnapshotId"],
            state=snapshot.get("State", ""),
            volume_id=snapshot.get("VolumeId", ""),
            volume_size=snapshot.get("VolumeSize", 0),
            progress=snapshot.get("Progress", ""),
            description=snapshot.get("Description", ""),
            encrypted=snapshot.get("Encrypted", False),
            tags=tags_to_dict(snapshot.get("Tags", [])),
        )
