"""
Shared fixtures for image-ops tests.

EC2 is replaced by a MagicMock client whose describe calls are driven by
side_effect sequences, and sleeps between polls are patched out.
"""

from unittest.mock import MagicMock, patch

import pytest

from image_ops.core.aws.ec2 import EC2Manager
from image_ops.jobs.create_image import CreateImageJob
from image_ops.utils.config import ConfigManager

IMAGE_ID = "ami-0123456789abcdef0"
SNAPSHOT_ID = "snap-0123456789abcdef0"
INSTANCE_ID = "i-0123456789abcdef0"


def image_record(snapshot_id=None, state="pending", **extra):
    """DescribeImages record, with or without a backing snapshot id."""
    ebs = {"DeleteOnTermination": True, "VolumeSize": 8, "VolumeType": "gp3"}
    if snapshot_id:
        ebs["SnapshotId"] = snapshot_id
    record = {
        "ImageId": IMAGE_ID,
        "Name": "web-server-golden",
        "State": state,
        "CreationDate": "2026-10-17T10:00:00.000Z",
        "BlockDeviceMappings": [{"DeviceName": "/dev/xvda", "Ebs": ebs}],
    }
    record.update(extra)
    return record


def images_response(*records):
    return {"Images": list(records)}


def snapshot_response(state, progress="50%"):
    return {
        "Snapshots": [
            {
                "SnapshotId": SNAPSHOT_ID,
                "VolumeId": "vol-0123456789abcdef0",
                "VolumeSize": 8,
                "State": state,
                "Progress": progress,
            }
        ]
    }


@pytest.fixture
def config_dir(tmp_path):
    """Settings directory with file logging disabled."""
    (tmp_path / "settings.yaml").write_text(
        "polling:\n  interval: 5\nlogging:\n  level: INFO\n  file: false\n"
    )
    return tmp_path


@pytest.fixture
def config_manager(config_dir):
    return ConfigManager(config_dir)


@pytest.fixture
def ec2_client():
    client = MagicMock()
    client.create_image.return_value = {"ImageId": IMAGE_ID}
    return client


@pytest.fixture
def job(config_manager, ec2_client):
    manager = EC2Manager(session=MagicMock(), ec2_client=ec2_client)
    return CreateImageJob(config_manager=config_manager, ec2_manager=manager)


@pytest.fixture(autouse=True)
def no_sleep():
    with patch("image_ops.jobs.create_image.time.sleep") as mock_sleep:
        yield mock_sleep
