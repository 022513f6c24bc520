"""Attachment reconciliation for a single page.

Attachments are identified by filename within their page. Remote attachments
without a desired counterpart are deleted first; desired attachments are then
uploaded when missing, or re-uploaded when the SHA-256 digest of the remote
bytes differs from the digest of the local file.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import BinaryIO, Dict, Iterator, List

from src.confluence_client.errors import AttachmentNotFoundError
from .errors import AttachmentSourceError
from .fingerprint import stream_digest
from .store import ContentStore

logger = logging.getLogger(__name__)


@dataclass
class AttachmentSyncResult:
    """Filenames touched while synchronizing the attachments of one page."""
    added: List[str] = field(default_factory=list)
    updated: List[str] = field(default_factory=list)
    unchanged: List[str] = field(default_factory=list)
    deleted: List[str] = field(default_factory=list)


class AttachmentSynchronizer:
    """Reconciles the attachment set of a page against desired attachments.

    Example:
        >>> sync = AttachmentSynchronizer(store)
        >>> sync.synchronize("123", {"diagram.png": "build/img/diagram.png"})
    """

    def __init__(self, store: ContentStore):
        self._store = store

    def synchronize(self, page_id: str, attachments: Dict[str, str]) -> AttachmentSyncResult:
        """Make the remote attachments of a page match the desired ones.

        Args:
            page_id: Remote identifier of the page owning the attachments
            attachments: Mapping of attachment filename to local source path

        Returns:
            AttachmentSyncResult listing the filenames per outcome

        Raises:
            AttachmentSourceError: If a local attachment file cannot be read
        """
        result = AttachmentSyncResult()
        self._delete_attachments_not_desired(page_id, attachments, result)

        for filename, source_path in attachments.items():
            self._add_or_update(page_id, filename, source_path, result)

        return result

    def _delete_attachments_not_desired(
        self,
        page_id: str,
        attachments: Dict[str, str],
        result: AttachmentSyncResult,
    ) -> None:
        for remote in self._store.list_attachments(page_id):
            if remote.title in attachments:
                continue
            logger.info(
                f"Deleting attachment '{remote.title}' (id {remote.attachment_id}) "
                f"from page {page_id}"
            )
            self._store.delete_attachment(remote.attachment_id)
            result.deleted.append(remote.title)

    def _add_or_update(
        self,
        page_id: str,
        filename: str,
        source_path: str,
        result: AttachmentSyncResult,
    ) -> None:
        try:
            existing = self._store.get_attachment_by_filename(page_id, filename)
        except AttachmentNotFoundError:
            logger.info(f"Adding attachment '{filename}' to page {page_id}")
            with _open_source(source_path) as source:
                self._store.add_attachment(page_id, filename, source)
            result.added.append(filename)
            return

        remote_digest = stream_digest(self._store.get_attachment_content(existing.download_link))
        with _open_source(source_path) as source:
            local_digest = stream_digest(source)

        if remote_digest == local_digest:
            logger.debug(f"Attachment '{filename}' on page {page_id} is unchanged")
            result.unchanged.append(filename)
            return

        logger.info(
            f"Updating attachment '{filename}' (id {existing.attachment_id}) on page {page_id}"
        )
        with _open_source(source_path) as source:
            self._store.update_attachment_content(
                page_id, existing.attachment_id, source, filename=filename
            )
        result.updated.append(filename)


@contextmanager
def _open_source(source_path: str) -> Iterator[BinaryIO]:
    try:
        source = open(source_path, 'rb')
    except OSError as e:
        raise AttachmentSourceError(source_path, e.strerror or str(e)) from e
    with source:
        yield source
