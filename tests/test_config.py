"""
Tests for settings loading and AWS session creation.
"""

import os
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from image_ops.utils.config import ConfigManager
from image_ops.utils.exceptions import AWSOperationError
from image_ops.utils.session import SessionManager, assume_role


class TestConfigManager:
    """Tests for YAML settings with environment overrides."""

    def test_missing_settings_file_gives_defaults(self, tmp_path):
        config = ConfigManager(tmp_path)

        assert config.config == {}
        assert config.get_poll_interval() == 5.0
        assert config.get_poll_timeout() is None
        assert config.is_file_logging_enabled() is True

    def test_yml_extension_is_found(self, tmp_path):
        (tmp_path / "settings.yml").write_text("polling:\n  interval: 3\n")

        assert ConfigManager(tmp_path).get_poll_interval() == 3.0

    def test_nested_values(self, tmp_path):
        (tmp_path / "settings.yaml").write_text(
            "aws:\n  region: eu-west-1\n  role_arn: arn:aws:iam::123456789012:role/builder\n"
            "polling:\n  timeout: 600\n"
        )
        config = ConfigManager(tmp_path)

        with patch.dict(os.environ, {}, clear=True):
            assert config.get_aws_region() == "eu-west-1"
        assert config.get_role_arn() == "arn:aws:iam::123456789012:role/builder"
        assert config.get_poll_timeout() == 600.0
        assert config.get_value("aws.missing.key", "fallback") == "fallback"

    def test_sample_settings_leave_region_to_boto3(self):
        sample_dir = Path(__file__).resolve().parent.parent / "configs"

        with patch.dict(os.environ, {}, clear=True):
            assert ConfigManager(sample_dir).get_aws_region() is None

    def test_environment_overrides_settings(self, tmp_path):
        (tmp_path / "settings.yaml").write_text("aws:\n  region: eu-west-1\n")
        config = ConfigManager(tmp_path)

        with patch.dict(os.environ, {"AWS_REGION": "us-east-1", "LOG_LEVEL": "DEBUG"}):
            assert config.get_aws_region() == "us-east-1"
            assert config.get_logging_level() == "DEBUG"

    def test_config_dir_from_environment(self, tmp_path):
        (tmp_path / "settings.yaml").write_text("polling:\n  interval: 7\n")

        with patch.dict(os.environ, {"IMAGE_OPS_CONFIG_DIR": str(tmp_path)}):
            assert ConfigManager().get_poll_interval() == 7.0

    def test_invalid_yaml_gives_empty_config(self, tmp_path):
        (tmp_path / "settings.yaml").write_text("polling: [unclosed\n")

        assert ConfigManager(tmp_path).config == {}

    def test_reload_config(self, tmp_path):
        settings = tmp_path / "settings.yaml"
        settings.write_text("polling:\n  interval: 1\n")
        config = ConfigManager(tmp_path)
        assert config.get_poll_interval() == 1.0

        settings.write_text("polling:\n  interval: 9\n")
        config.reload_config()

        assert config.get_poll_interval() == 9.0


class TestSessionManager:
    """Tests for boto3 session creation and role assumption."""

    @patch("image_ops.utils.session.boto3.Session")
    def test_ambient_session(self, mock_session):
        session = SessionManager.get_session(region="ap-southeast-2", profile="ops")

        mock_session.assert_called_once_with(profile_name="ops", region_name="ap-southeast-2")
        assert session is mock_session.return_value

    @patch("image_ops.utils.session.boto3.Session")
    def test_assume_role(self, mock_session):
        base = MagicMock()
        base.client.return_value.assume_role.return_value = {
            "Credentials": {
                "AccessKeyId": "AKIA",
                "SecretAccessKey": "secret",
                "SessionToken": "token",
            }
        }

        assume_role(
            "arn:aws:iam::123456789012:role/builder",
            region="us-east-1",
            role_session_name="create_image-1234",
            base_session=base,
        )

        base.client.return_value.assume_role.assert_called_once_with(
            RoleArn="arn:aws:iam::123456789012:role/builder",
            RoleSessionName="create_image-1234",
        )
        mock_session.assert_called_once_with(
            aws_access_key_id="AKIA",
            aws_secret_access_key="secret",
            aws_session_token="token",
            region_name="us-east-1",
        )

    def test_assume_role_failure(self):
        base = MagicMock()
        base.client.return_value.assume_role.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "nope"}}, "AssumeRole"
        )

        with pytest.raises(AWSOperationError, match="assuming role"):
            assume_role("arn:aws:iam::123456789012:role/builder", base_session=base)
