"""Simple EC2 Manager for image operations."""

from typing import Dict, List, Any, Optional
import boto3
from botocore.exceptions import BotoCoreError, ClientError
from image_ops.utils.exceptions import (
    AWSOperationError,
    ImageNotFoundError,
    SnapshotNotFoundError,
)
from image_ops.utils.logger import setup_logger


class EC2Manager:
    """Simple AWS EC2 image and snapshot manager.

    Every AWS error is raised as AWSOperationError; nothing is retried here.
    """

    def __init__(
        self,
        session: boto3.Session,
        region: Optional[str] = None,
        logger=None,
        ec2_client=None,
    ):
        """Initialize EC2Manager."""
        self.session = session
        self.region = region
        self.logger = logger or setup_logger(__name__)
        if ec2_client is None:
            try:
                ec2_client = session.client("ec2", region_name=region)
            except (ClientError, BotoCoreError) as e:
                self.logger.error(f"Error creating EC2 client: {e}")
                raise AWSOperationError("loading config", e) from e
        self.ec2_client = ec2_client

    def create_image(
        self,
        instance_id: str,
        name: str,
        description: Optional[str] = None,
        no_reboot: bool = False,
        tag_specifications: Optional[List[Dict[str, Any]]] = None,
    ) -> str:
        """Create an AMI from an instance and return its image id."""
        params = {"InstanceId": instance_id, "Name": name}
        if description:
            params["Description"] = description
        if no_reboot:
            params["NoReboot"] = True
        if tag_specifications:
            params["TagSpecifications"] = tag_specifications

        try:
            response = self.ec2_client.create_image(**params)
        except (ClientError, BotoCoreError) as e:
            self.logger.error(f"Error creating image from {instance_id}: {e}")
            raise AWSOperationError("creating image", e) from e

        image_id = response["ImageId"]
        self.logger.info(f"Requested image {image_id} ({name}) from instance {instance_id}")
        return image_id

    def describe_image(self, image_id: str) -> Dict[str, Any]:
        """Describe a single AMI."""
        try:
            response = self.ec2_client.describe_images(ImageIds=[image_id])
        except (ClientError, BotoCoreError) as e:
            self.logger.error(f"Error describing image {image_id}: {e}")
            raise AWSOperationError("describing image", e) from e

        images = response.get("Images", [])
        if not images:
            raise ImageNotFoundError(image_id)
        return images[0]

    def describe_snapshot(self, snapshot_id: str) -> Dict[str, Any]:
        """Describe a single EBS snapshot."""
        try:
            response = self.ec2_client.describe_snapshots(SnapshotIds=[snapshot_id])
        except (ClientError, BotoCoreError) as e:
            self.logger.error(f"Error describing snapshot {snapshot_id}: {e}")
            raise AWSOperationError("describing snapshots", e) from e

        snapshots = response.get("Snapshots", [])
        if not snapshots:
            raise SnapshotNotFoundError(snapshot_id)
        return snapshots[0]

