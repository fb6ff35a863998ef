"""Image Ops - create EC2 images and wait for their snapshots."""

__version__ = "1.0.0"
