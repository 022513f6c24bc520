"""Typed exceptions raised while building the desired page tree."""

from typing import Optional

from src.confluence_client.errors import SyncError


class PageTreeError(SyncError):
    """Raised when the page metadata or a rendered page cannot be used."""

    def __init__(self, message: str, path: Optional[str] = None):
        if path:
            full_message = f"Page tree error in {path}: {message}"
        else:
            full_message = f"Page tree error: {message}"
        super().__init__(full_message)
        self.path = path
        self.original_message = message
