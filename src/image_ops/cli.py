#!/usr/bin/env python3
"""
Image Ops - CLI
Create an AMI from an EC2 instance and wait for its snapshot to complete
"""

import click

from image_ops import __version__
from image_ops.core.models import parse_tags
from image_ops.jobs.create_image import CreateImageJob
from image_ops.utils.decorators import image_operation
from image_ops.utils.exceptions import TagParseError
from image_ops.utils.logger import setup_logger


def setup_logging(verbose: bool = False):
    level = "DEBUG" if verbose else "INFO"
    return setup_logger("image_ops_cli", level=level)


class ImageOpsCommand(click.Command):
    """Command that reports usage errors on stdout, like runtime errors."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            click.echo(f"Error: {e.format_message()}")
            ctx.exit(e.exit_code)


def _parse_tag_option(ctx, param, values):
    """Parse every ``key:value[,key:value]`` occurrence of a tag option."""
    try:
        return [parse_tags(value) for value in values]
    except TagParseError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param)


def _require_value(ctx, param, value):
    if not value or not value.strip():
        raise click.BadParameter("must not be empty", ctx=ctx, param=param)
    return value


# Each long option also accepts the single-dash spelling, e.g. -instance-id
@click.command(cls=ImageOpsCommand, context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option(
    "--instance-id", "-instance-id", "instance_id",
    required=True, callback=_require_value, help="Instance ID to create the image from",
)
@click.option(
    "--name", "-name", "name",
    required=True, callback=_require_value, help="Image name",
)
@click.option(
    "--image-tag", "-image-tag", "image_tags",
    multiple=True, callback=_parse_tag_option,
    help="Image tags (eg. key1:val1,key2:val2); repeatable",
)
@click.option(
    "--snapshot-tag", "-snapshot-tag", "snapshot_tags",
    multiple=True, callback=_parse_tag_option,
    help="Snapshot tags (eg. key1:val1,key2:val2); repeatable",
)
@click.option("--description", help="Image description")
@click.option("--no-reboot", is_flag=True, help="Create the image without rebooting the instance")
@click.option("--region", help="AWS region (default: settings, then AWS config)")
@click.option("--profile", help="AWS named profile")
@click.option(
    "--poll-interval", type=click.FloatRange(min=0, min_open=True),
    help="Seconds between status checks (default: 5)",
)
@click.option(
    "--timeout", type=click.FloatRange(min=0),
    help="Give up after this many seconds (default: wait forever)",
)
@click.option("--output", type=click.Path(dir_okay=False), help="Also write the image JSON to this file")
@click.option(
    "--config", "config_dir", type=click.Path(file_okay=False),
    help="Directory containing settings.yaml",
)
@click.version_option(__version__, prog_name="image-ops")
@click.pass_context
@image_operation(CreateImageJob)
def create_image(
    ctx, verbose, instance_id, name, image_tags, snapshot_tags, description,
    no_reboot, region, profile, poll_interval, timeout, output, config_dir,
):
    """Create an AMI from an EC2 instance

    Waits until the image references its EBS snapshot and the snapshot is
    completed, then prints the image description as JSON.
    """
    logger = setup_logging(verbose)
    logger.debug(f"Creating image '{name}' from instance {instance_id}")
    # All processing logic is handled by the decorator


def main():
    create_image()


if __name__ == "__main__":
    main()
