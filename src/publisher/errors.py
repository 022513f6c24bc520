"""Typed exception hierarchy for publish errors.

Configuration errors are raised before any remote call is made. Ambiguity
errors abort the run because retrying against the same duplicate pages would
reproduce them. Remote failures are never caught here; they propagate from
the content store unchanged.
"""

from typing import Optional

from src.confluence_client.errors import SyncError


class PublishError(SyncError):
    """Base exception for all publish errors."""
    pass


class PublishConfigurationError(PublishError):
    """Raised when mandatory publish parameters are missing or inconsistent."""

    def __init__(self, message: str, parameter: Optional[str] = None):
        super().__init__(message)
        self.parameter = parameter


class AmbiguousPageTitleError(PublishError):
    """Raised when more than one remote sibling carries the same title."""

    def __init__(self, title: str, parent_id: str, count: int):
        super().__init__(
            f"Found {count} pages titled '{title}' under parent {parent_id}; "
            f"refusing to guess which one to update"
        )
        self.title = title
        self.parent_id = parent_id
        self.count = count


class AttachmentSourceError(PublishError):
    """Raised when a local attachment file cannot be read."""

    def __init__(self, path: str, reason: Optional[str] = None):
        message = f"Could not read attachment {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.path = path
        self.reason = reason
