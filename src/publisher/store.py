"""Capability set the publisher needs from a remote content store.

The publisher depends only on this protocol. The Confluence-backed
implementation lives in src.confluence_client.api_wrapper; tests use an
in-memory implementation.
"""

from typing import BinaryIO, List, Optional, Protocol, Union

from src.models import RemoteAttachment, RemotePage

ByteStream = Union[bytes, BinaryIO]


class ContentStore(Protocol):
    """Remote reads and mutations issued by the publisher, one at a time."""

    def list_children(self, page_id: str) -> List[RemotePage]:
        """Return the direct child pages of a page, in store order."""
        ...

    def get_page(self, page_id: str) -> RemotePage:
        """Return a page with its content and version."""
        ...

    def create_page(self, space_key: str, parent_id: str, title: str, content: str) -> str:
        """Create a page under a parent and return its new identifier."""
        ...

    def update_page(
        self,
        page_id: str,
        parent_id: Optional[str],
        title: str,
        content: str,
        version: int,
    ) -> None:
        """Update a page; fails unless version is the current version + 1."""
        ...

    def delete_page(self, page_id: str) -> None:
        ...

    def list_attachments(self, page_id: str) -> List[RemoteAttachment]:
        ...

    def get_attachment_by_filename(self, page_id: str, filename: str) -> RemoteAttachment:
        """Return the attachment, or raise AttachmentNotFoundError."""
        ...

    def get_attachment_content(self, download_link: str) -> ByteStream:
        ...

    def add_attachment(self, page_id: str, filename: str, content: ByteStream) -> None:
        ...

    def update_attachment_content(
        self,
        page_id: str,
        attachment_id: str,
        content: ByteStream,
        filename: Optional[str] = None,
    ) -> None:
        ...

    def delete_attachment(self, attachment_id: str) -> None:
        ...

    def get_property(self, page_id: str, key: str) -> Optional[str]:
        """Return the property value, or None when the property is absent."""
        ...

    def set_property(self, page_id: str, key: str, value: str) -> None:
        ...

    def delete_property(self, page_id: str, key: str) -> None:
        ...
