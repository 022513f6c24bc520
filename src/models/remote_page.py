"""Snapshots of pages and attachments as held by the content store."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RemotePage:
    """Confluence page as read from (or just written to) the content store.

    Instances are transient: they are fetched for one reconciliation step
    and discarded once the corresponding mutation has been issued.

    Attributes:
        page_id: Unique identifier for the page
        parent_id: Parent page ID (None if the store did not report one)
        title: Page title
        content: Page content in storage format (XHTML), empty when not fetched
        version: Current version number, owned by the store (starts at 1)
    """
    page_id: str
    parent_id: Optional[str]
    title: str
    content: str = ""
    version: int = 1


@dataclass(frozen=True)
class RemoteAttachment:
    """Attachment of a Confluence page.

    Attributes:
        attachment_id: Unique identifier for the attachment
        title: Attachment filename (identity within its page)
        download_link: Relative download link for the attachment bytes
    """
    attachment_id: str
    title: str
    download_link: str
