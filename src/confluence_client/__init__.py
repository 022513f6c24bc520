"""Confluence client library for the publisher.

This package provides the Confluence-backed content store used by the
publisher: a thin wrapper over atlassian-python-api with credential
loading, rate-limit retry, and translation into typed exceptions.
"""

from .errors import (
    SyncError,
    ConfluenceError,
    InvalidCredentialsError,
    PageNotFoundError,
    AttachmentNotFoundError,
    VersionConflictError,
    PageAlreadyExistsError,
    APIUnreachableError,
    APIAccessError,
)

__all__ = [
    "SyncError",
    "ConfluenceError",
    "InvalidCredentialsError",
    "PageNotFoundError",
    "AttachmentNotFoundError",
    "VersionConflictError",
    "PageAlreadyExistsError",
    "APIUnreachableError",
    "APIAccessError",
]
