"""Simple data models for AWS resource tags applied at creation time."""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Any

from image_ops.core.constants import (
    RESOURCE_TYPE_IMAGE,
    RESOURCE_TYPE_SNAPSHOT,
    TAG_KEY_VALUE_SEPARATOR,
    TAG_PAIR_SEPARATOR,
)
from image_ops.utils.exceptions import TagParseError


@dataclass(frozen=True)
class Tag:
    """A single key/value tag."""
    key: str
    value: str

    def to_aws(self) -> Dict[str, str]:
        return {"Key": self.key, "Value": self.value}

    @classmethod
    def parse(cls, token: str) -> "Tag":
        """Parse one ``key:value`` token.

        The token must split into exactly one key and one value, and the key
        must not be empty. ``"env:"`` is accepted as an empty value.
        """
        parts = token.split(TAG_KEY_VALUE_SEPARATOR)
        if len(parts) != 2 or not parts[0]:
            raise TagParseError(f"invalid tag: {token}")
        return cls(key=parts[0], value=parts[1])


def parse_tags(raw: str) -> List[Tag]:
    """Parse a comma separated list of ``key:value`` tokens."""
    return [Tag.parse(token) for token in raw.split(TAG_PAIR_SEPARATOR)]


def tags_to_dict(aws_tags: Iterable[Dict[str, Any]]) -> Dict[str, str]:
    """Flatten boto3 ``[{"Key": .., "Value": ..}]`` tags into a dict."""
    tags = {}
    for tag in aws_tags or []:
        if tag.get("Key"):
            tags[tag["Key"]] = tag.get("Value", "")
    return tags


def build_tag_specifications(
    image_tags: Iterable[Tag] = (), snapshot_tags: Iterable[Tag] = ()
) -> List[Dict[str, Any]]:
    """Build CreateImage TagSpecifications, one per non-empty tag set."""
    specifications = []
    for resource_type, tags in (
        (RESOURCE_TYPE_IMAGE, list(image_tags)),
        (RESOURCE_TYPE_SNAPSHOT, list(snapshot_tags)),
    ):
        if tags:
            specifications.append(
                {
                    "ResourceType": resource_type,
                    "Tags": [tag.to_aws() for tag in tags],
                }
            )
    return specifications
