"""Image Operations Jobs package."""

from .base import BaseJob
from .create_image import CreateImageJob

__all__ = [
    "BaseJob",
    "CreateImageJob",
]
