"""Exception classes for image operations.

The EC2 manager and the image job raise these; the CLI reports any
ImageOpsError and exits with status 1.
"""


class ImageOpsError(Exception):
    """Base exception for image operations."""

    pass


class CLIError(ImageOpsError):
    """Custom exception for CLI-related errors."""

    pass


class TagParseError(ImageOpsError, ValueError):
    """Raised when a raw tag token is not a key:value pair."""

    pass


class AWSOperationError(ImageOpsError):
    """Raised when a call to AWS fails."""

    def __init__(self, operation: str, error: Exception):
        self.operation = operation
        self.error = error
        super().__init__(f"error {operation}: {error}")


class ImageNotFoundError(ImageOpsError):
    """Raised when DescribeImages returns no image."""

    def __init__(self, image_id: str):
        self.image_id = image_id
        super().__init__(f"no images found for {image_id}")


class SnapshotNotFoundError(ImageOpsError):
    """Raised when DescribeSnapshots returns no snapshot."""

    def __init__(self, snapshot_id: str):
        self.snapshot_id = snapshot_id
        super().__init__(f"no snapshots found for {snapshot_id}")


class ImageCreationError(ImageOpsError):
    """Raised when the image reaches a state it cannot recover from."""

    pass


class SnapshotFailedError(ImageOpsError):
    """Raised when the backing snapshot ends in the error state."""

    pass


class UnexpectedSnapshotStateError(ImageOpsError):
    """Raised when the snapshot is neither pending nor terminal."""

    def __init__(self, snapshot_id: str, state: str):
        self.snapshot_id = snapshot_id
        self.state = state
        super().__init__(f"snapshot {snapshot_id} in unexpected state: {state}")


class PollTimeoutError(ImageOpsError):
    """Raised when polling runs past the configured deadline."""

    pass

