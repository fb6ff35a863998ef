#!/usr/bin/env python3
"""Core constants for image operations."""

# Polling Constants
DEFAULT_POLL_INTERVAL = 5  # seconds

# EC2 Tag Specification Resource Types
RESOURCE_TYPE_IMAGE = "image"
RESOURCE_TYPE_SNAPSHOT = "snapshot"

# Tag Token Separators
TAG_PAIR_SEPARATOR = ","
TAG_KEY_VALUE_SEPARATOR = ":"

# Configuration Constants
CONFIG_DIR_ENV_VAR = "IMAGE_OPS_CONFIG_DIR"
DEFAULT_CONFIG_DIR = "configs"

# File and Directory Constants
DEFAULT_LOG_DIR = "logs"
