#!/usr/bin/env python3
"""
Create Image Job

Creates an AMI from an EC2 instance and waits until the image references
its backing EBS snapshot and that snapshot has finished.
"""

import time
from typing import Iterable, Optional
from .base import BaseJob
from image_ops.core.aws.ec2 import EC2Manager
from image_ops.core.constants import DEFAULT_POLL_INTERVAL
from image_ops.core.models import (
    AMIInfo,
    SnapshotInfo,
    Tag,
    build_tag_specifications,
)
from image_ops.utils.config import ConfigManager
from image_ops.utils.exceptions import (
    ImageCreationError,
    PollTimeoutError,
    SnapshotFailedError,
    UnexpectedSnapshotStateError,
)


class CreateImageJob(BaseJob):
    """Job to create an AMI from an EC2 instance and wait for its snapshot"""

    def __init__(
        self,
        config_manager: Optional[ConfigManager] = None,
        ec2_manager: Optional[EC2Manager] = None,
        region: Optional[str] = None,
        profile: Optional[str] = None,
        log_level: Optional[str] = None,
    ):
        super().__init__(
            config_manager=config_manager,
            job_name="create_image",
            log_level=log_level,
        )
        self.region = region
        self.profile = profile
        self._ec2_manager = ec2_manager

    @property
    def ec2(self) -> EC2Manager:
        """EC2 manager, created from a fresh session on first use."""
        if self._ec2_manager is None:
            session = self.create_aws_session(self.region, self.profile)
            self._ec2_manager = EC2Manager(
                session,
                region=self.region or session.region_name,
                logger=self.logger,
            )
        return self._ec2_manager

    def execute(
        self,
        instance_id: str,
        image_name: str,
        image_tags: Iterable[Tag] = (),
        snapshot_tags: Iterable[Tag] = (),
        description: Optional[str] = None,
        no_reboot: bool = False,
        poll_interval: Optional[float] = None,
        timeout: Optional[float] = None,
        **kwargs,
    ) -> AMIInfo:
        """Create the image and block until its snapshot is completed.

        Returns the image as described when its snapshot id first appeared.
        ``timeout`` bounds both polling phases together; None waits forever.
        Raises an ImageOpsError subclass on any failure.
        """
        if poll_interval is None:
            poll_interval = self.config_manager.get_poll_interval()
        if timeout is None:
            timeout = self.config_manager.get_poll_timeout()
        deadline = time.monotonic() + timeout if timeout is not None else None

        self.logger.info(
            f"[{self.correlation_id}] Creating image '{image_name}' from instance {instance_id}"
        )
        image_id = self.ec2.create_image(
            instance_id=instance_id,
            name=image_name,
            description=description,
            no_reboot=no_reboot,
            tag_specifications=build_tag_specifications(image_tags, snapshot_tags),
        )

        image = self.wait_for_snapshot_id(image_id, poll_interval, deadline)
        self.wait_for_snapshot_completed(image.snapshot_id, poll_interval, deadline)

        self.logger.info(
            f"[{self.correlation_id}] Image {image.image_id} backed by snapshot "
            f"{image.snapshot_id} is complete"
        )
        return image

    def wait_for_snapshot_id(
        self,
        image_id: str,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        deadline: Optional[float] = None,
    ) -> AMIInfo:
        """Poll the image until a block device mapping exposes a snapshot id."""
        while True:
            image = AMIInfo.from_aws_image(self.ec2.describe_image(image_id))
            if image.has_snapshot:
                self.logger.info(
                    f"[{self.correlation_id}] Image {image_id} references snapshot {image.snapshot_id}"
                )
                return image

            if image.is_failed:
                reason = image.raw.get("StateReason", {}).get("Message", "")
                raise ImageCreationError(
                    f"image {image_id} is {image.state} before its snapshot was created"
                    + (f": {reason}" if reason else "")
                )

            self.logger.debug("waiting for snapshot to be created")
            self._sleep_until_next_check(
                poll_interval, deadline, f"snapshot of image {image_id}"
            )

    def wait_for_snapshot_completed(
        self,
        snapshot_id: str,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        deadline: Optional[float] = None,
    ) -> SnapshotInfo:
        """Poll the snapshot until it is completed.

        ``error`` raises SnapshotFailedError; any state other than
        ``pending`` raises UnexpectedSnapshotStateError without polling again.
        """
        while True:
            snapshot = SnapshotInfo.from_aws_snapshot(
                self.ec2.describe_snapshot(snapshot_id)
            )
            if snapshot.is_completed:
                return snapshot
            if snapshot.is_failed:
                raise SnapshotFailedError(f"snapshot {snapshot_id} creation failed")
            if not snapshot.is_pending:
                raise UnexpectedSnapshotStateError(snapshot_id, snapshot.state)

            self.logger.debug(
                f"snapshot state: {snapshot.state}, progress: {snapshot.progress or 'n/a'}"
            )
            self._sleep_until_next_check(
                poll_interval, deadline, f"snapshot {snapshot_id} to complete"
            )

    def _sleep_until_next_check(
        self, poll_interval: float, deadline: Optional[float], waiting_for: str
    ) -> None:
        if deadline is not None and time.monotonic() + poll_interval > deadline:
            raise PollTimeoutError(f"timed out waiting for {waiting_for}")
        time.sleep(poll_interval)
