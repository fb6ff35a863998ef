"""Base job class for image operations."""

from abc import ABC, abstractmethod
from typing import Any, Optional
import uuid
import boto3
from image_ops.utils.logger import setup_logger
from image_ops.utils.config import ConfigManager
from image_ops.utils.session import SessionManager


class BaseJob(ABC):
    """Base class for all image operation jobs."""

    def __init__(
        self,
        config_manager: Optional[ConfigManager] = None,
        job_name: str = None,
        log_level: Optional[str] = None,
    ):
        """Initialize the job with configuration."""
        self.config_manager = config_manager or ConfigManager()
        self.job_name = job_name or self.__class__.__name__.lower().replace('job', '')
        self.correlation_id = str(uuid.uuid4())[:8]  # Short correlation ID for tracking

        log_file = f"{self.job_name}.log" if self.config_manager.is_file_logging_enabled() else None
        self.logger = setup_logger(
            name=self.__class__.__module__,
            log_file=log_file,
            level=log_level or self.config_manager.get_logging_level(),
            log_dir=self.config_manager.get_logging_path(),
        )

    def create_aws_session(
        self,
        region: Optional[str] = None,
        profile: Optional[str] = None,
    ) -> 'boto3.Session':
        """
        Create AWS session, assuming the configured role if there is one
        """
        region = region or self.config_manager.get_aws_region()
        profile = profile or self.config_manager.get_aws_profile()
        role_arn = self.config_manager.get_role_arn()

        self.logger.debug(
            f"[{self.correlation_id}] Creating AWS session "
            f"(region={region or 'default'}, profile={profile or 'default'})"
        )

        return SessionManager.get_session(
            region=region,
            profile=profile,
            role_arn=role_arn,
            role_session_name=f"{self.job_name}-{self.correlation_id}",
        )

    @abstractmethod
    def execute(self, **kwargs) -> Any:
        """Execute the job with given parameters."""
        pass
