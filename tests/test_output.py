"""
Tests for JSON rendering of the final image record.
"""

import json
from datetime import datetime, timezone

import pytest

from image_ops.core.models import AMIInfo
from image_ops.utils.decorators import _job_parameters, serialize_image
from image_ops.utils.exceptions import CLIError
from image_ops.core.models import Tag

from conftest import SNAPSHOT_ID, image_record


class TestSerializeImage:

    def test_single_line_json(self):
        image = AMIInfo.from_aws_image(image_record(SNAPSHOT_ID))

        rendered = serialize_image(image)

        assert "\n" not in rendered
        assert json.loads(rendered) == image_record(SNAPSHOT_ID)

    def test_datetimes_rendered_as_iso(self):
        created = datetime(2026, 10, 17, 10, 0, tzinfo=timezone.utc)
        image = AMIInfo.from_aws_image(image_record(SNAPSHOT_ID, LastLaunchedTime=created))

        rendered = json.loads(serialize_image(image))

        assert rendered["LastLaunchedTime"] == "2026-10-17T10:00:00+00:00"

    def test_unserializable_value(self):
        image = AMIInfo.from_aws_image(image_record(SNAPSHOT_ID, Extra=object()))

        with pytest.raises(CLIError, match="error marshalling image"):
            serialize_image(image)


class TestJobParameters:

    def test_flattens_repeated_tag_options(self):
        params = _job_parameters(
            {
                "name": "golden",
                "image_tags": [[Tag("a", "1"), Tag("b", "2")], [Tag("c", "3")]],
                "snapshot_tags": [],
            }
        )

        assert params["image_name"] == "golden"
        assert "name" not in params
        assert params["image_tags"] == [Tag("a", "1"), Tag("b", "2"), Tag("c", "3")]
        assert params["snapshot_tags"] == []
