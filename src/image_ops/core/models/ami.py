"""Simple data models for AWS AMI management."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Any

from .tags import tags_to_dict


class AMIState(Enum):
    """AMI states."""
    PENDING = "pending"
    AVAILABLE = "available"
    INVALID = "invalid"
    DEREGISTERED = "deregistered"
    TRANSIENT = "transient"
    FAILED = "failed"
    ERROR = "error"


# States from which an image never gains a backing snapshot
AMI_FAILURE_STATES = frozenset(
    {AMIState.INVALID.value, AMIState.FAILED.value, AMIState.ERROR.value}
)


@dataclass
class AMIInfo:
    """Simple AMI information model."""
    image_id: str
    name: str
    state: str = "pending"
    snapshot_id: Optional[str] = None
    tags: Dict[str, str] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def is_available(self) -> bool:
        return self.state == AMIState.AVAILABLE.value

    @property
    def is_failed(self) -> bool:
        return self.state in AMI_FAILURE_STATES

    @property
    def has_snapshot(self) -> bool:
        return bool(self.snapshot_id)

    def get_tag(self, key: str, default: str = "") -> str:
        return self.tags.get(key, default)

    @staticmethod
    def find_snapshot_id(image: Dict[str, Any]) -> Optional[str]:
        """Return the first EBS snapshot id among the block device mappings.

        Mappings without an ``Ebs`` entry (instance store volumes) are skipped.
        """
        for mapping in image.get("BlockDeviceMappings") or []:
            snapshot_id = (mapping.get("Ebs") or {}).get("SnapshotId")
            if snapshot_id:
                return snapshot_id
        return None

    @classmethod
    def from_aws_image(cls, image: Dict[str, Any]) -> "AMIInfo":
        """Create AMIInfo from AWS image data."""
        return cls(
            image_id=image["ImageId"],
            name=image.get("Name", ""),
            state=image.get("State", "pending"),
            snapshot_id=cls.find_snapshot_id(image),
            tags=tags_to_dict(image.get("Tags", [])),
            raw=image,
        )
