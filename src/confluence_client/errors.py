"""Typed exception hierarchy for Confluence-related errors.

This module defines the root exception of the publisher and the errors raised
by the Confluence content store. All exceptions inherit from SyncError so the
CLI can catch any application-level failure in one place, and each one
carries the identifiers needed to explain what went wrong.
"""

from typing import Optional


class SyncError(Exception):
    """Base exception for all confluence-publisher errors.

    Use this to catch any application-level error from the publish tool.
    """
    pass


class ConfluenceError(SyncError):
    """Base exception for all Confluence-related errors."""
    pass


class InvalidCredentialsError(ConfluenceError):
    """Raised when API credentials are invalid or authentication fails."""

    def __init__(self, user: str, endpoint: str):
        super().__init__(
            f"API key is invalid (user: {user}, endpoint: {endpoint})"
        )
        self.user = user
        self.endpoint = endpoint


class PageNotFoundError(ConfluenceError):
    """Raised when a requested page does not exist."""

    def __init__(self, page_id: str):
        super().__init__(f"Page {page_id} not found")
        self.page_id = page_id


class AttachmentNotFoundError(ConfluenceError):
    """Raised when a page has no attachment with the requested filename.

    This is the normal signal for "upload as a new attachment" and is not
    treated as a failure by the publisher.
    """

    def __init__(self, page_id: str, filename: str):
        super().__init__(
            f"Attachment '{filename}' not found on page {page_id}"
        )
        self.page_id = page_id
        self.filename = filename


class VersionConflictError(ConfluenceError):
    """Raised when Confluence rejects an update because of a stale version."""

    def __init__(self, page_id: str, version: int):
        super().__init__(
            f"Version conflict updating page {page_id} "
            f"(version {version} is not the next version)"
        )
        self.page_id = page_id
        self.version = version


class APIUnreachableError(ConfluenceError):
    """Raised when the Confluence API is not available or unreachable."""

    def __init__(self, endpoint: str):
        super().__init__(f"API is not available at {endpoint}")
        self.endpoint = endpoint


class APIAccessError(ConfluenceError):
    """Raised when API access fails after retries or due to access restrictions."""

    def __init__(self, message: str = "Confluence API failure (after 3 retries)"):
        super().__init__(message)


class PageAlreadyExistsError(ConfluenceError):
    """Raised when Confluence refuses to create a page with a duplicate title."""

    def __init__(self, title: str, parent_id: Optional[str] = None):
        if parent_id:
            message = f"Page with title '{title}' already exists under parent {parent_id}"
        else:
            message = f"Page with title '{title}' already exists"
        super().__init__(message)
        self.title = title
        self.parent_id = parent_id
