"""Decorator patterns for image operations."""

import click
import json
from datetime import date, datetime
from functools import wraps
from typing import Any, Callable, Dict, Optional, Type

from image_ops.core.models import AMIInfo
from image_ops.jobs.base import BaseJob
from image_ops.utils.config import ConfigManager
from image_ops.utils.exceptions import CLIError, ImageOpsError
from image_ops.utils.logger import setup_logger


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def serialize_image(image: AMIInfo) -> str:
    """Render the DescribeImages record of an image as a JSON object."""
    try:
        return json.dumps(image.raw, default=_json_default)
    except (TypeError, ValueError) as e:
        raise CLIError(f"error marshalling image: {e}") from e


def handle_operation_error(operation_name: str, error: Exception) -> None:
    """Centralized error handling for operations.

    Args:
        operation_name: Name of the operation that failed
        error: Exception that occurred
    """
    click.echo(str(error))

    logger = setup_logger("image_ops.errors")
    logger.error(
        f"Error in {operation_name}: {error}",
        extra={"operation": operation_name, "error_type": type(error).__name__},
    )


def handle_output(
    record: str,
    output_path: Optional[str] = None,
    correlation_id: Optional[str] = None,
) -> None:
    """Write the record to stdout and, when requested, to a file."""
    logger = setup_logger("image_ops.output")

    click.echo(record)

    if output_path:
        try:
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(record + "\n")
        except OSError as e:
            raise CLIError(f"error writing {output_path}: {e}") from e
        logger.info(f"[{correlation_id or 'N/A'}] Results saved to {output_path}")


def _job_parameters(kwargs: Dict[str, Any]) -> Dict[str, Any]:
    """Map CLI parameter names to job parameter names."""
    params = dict(kwargs)
    params["image_name"] = params.pop("name")
    for key in ("image_tags", "snapshot_tags"):
        params[key] = [tag for group in params.get(key) or () for tag in group]
    return params


def execute_image_operation(
    job_class: Type[BaseJob], operation_name: str = "image_operation", **kwargs
) -> AMIInfo:
    """Build the job from configuration, run it and emit its output."""
    config_dir = kwargs.pop("config_dir", None)
    output = kwargs.pop("output", None)
    verbose = kwargs.pop("verbose", False)
    region = kwargs.pop("region", None)
    profile = kwargs.pop("profile", None)

    config = ConfigManager(config_dir)
    job = job_class(
        config_manager=config,
        region=region,
        profile=profile,
        log_level="DEBUG" if verbose else None,
    )

    job.logger.debug(f"[{job.correlation_id}] Running {operation_name}")
    image = job.execute(**_job_parameters(kwargs))

    handle_output(serialize_image(image), output, job.correlation_id)
    return image


def image_operation(job_class: Type[BaseJob]):
    """Decorator that runs ``job_class`` for a click command.

    The wrapped command body runs first for command-level setup. Any
    ImageOpsError is reported and turned into exit status 1.
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(ctx, **kwargs):
            operation_name = func.__name__
            func(ctx, **kwargs)

            try:
                return execute_image_operation(
                    job_class, operation_name=operation_name, **kwargs
                )
            except ImageOpsError as e:
                handle_operation_error(operation_name, e)
                ctx.exit(1)

        return wrapper

    return decorator
