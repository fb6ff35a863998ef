#!/usr/bin/env python3
"""
utils/session.py

Session management utilities for AWS interactions.

Provides functions and classes to handle AWS session creation and role assumption.
"""

import boto3
from typing import Optional
from botocore.exceptions import BotoCoreError, ClientError
from .exceptions import AWSOperationError
from .logger import setup_logger

logger = setup_logger(__name__)


def assume_role(
    role_arn: str,
    region: Optional[str] = None,
    role_session_name: str = "image-ops",
    base_session: Optional[boto3.Session] = None,
) -> boto3.Session:
    """Assumes a role and returns a boto3 Session with its temporary credentials."""
    base_session = base_session or boto3.Session(region_name=region)

    try:
        sts_client = base_session.client("sts", region_name=region)
        response = sts_client.assume_role(
            RoleArn=role_arn, RoleSessionName=role_session_name
        )
    except ClientError as e:
        error_code = e.response["Error"]["Code"]
        logger.error(f"Failed to assume role {role_arn}: {error_code}")
        raise AWSOperationError(f"assuming role {role_arn}", e) from e
    except BotoCoreError as e:
        raise AWSOperationError(f"assuming role {role_arn}", e) from e

    credentials = response["Credentials"]
    return boto3.Session(
        aws_access_key_id=credentials["AccessKeyId"],
        aws_secret_access_key=credentials["SecretAccessKey"],
        aws_session_token=credentials["SessionToken"],
        region_name=region,
    )


class SessionManager:
    """Manages AWS sessions for role assumption and credential handling."""

    @classmethod
    def get_session(
        cls,
        region: Optional[str] = None,
        profile: Optional[str] = None,
        role_arn: Optional[str] = None,
        role_session_name: str = "image-ops",
    ) -> boto3.Session:
        """Create a boto3 Session from the ambient credential chain.

        When ``role_arn`` is set the role is assumed on top of that chain.
        """
        try:
            session = boto3.Session(profile_name=profile, region_name=region)
        except BotoCoreError as e:
            raise AWSOperationError("loading config", e) from e

        if role_arn:
            logger.info(f"Assuming role {role_arn}")
            return assume_role(
                role_arn,
                region=region or session.region_name,
                role_session_name=role_session_name,
                base_session=session,
            )
        return session
