"""Create-or-update reconciliation of a single page."""

import logging
from enum import Enum

from src.models import DesiredPage, RemotePage
from .events import PageAdded, PageUpdated, PublishListener
from .fingerprint import CONTENT_HASH_PROPERTY_KEY, INITIAL_PAGE_VERSION, content_hash
from .store import ContentStore

logger = logging.getLogger(__name__)


class SyncOutcome(Enum):
    """What happened to a page during reconciliation."""
    ADDED = "added"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


class PageSynchronizer:
    """Creates missing pages and updates changed ones.

    A page is unchanged when the content hash stored on the remote page
    equals the hash of the desired content and the title is the same. A
    missing hash property is never treated as a match.
    """

    def __init__(self, store: ContentStore, listener: PublishListener):
        self._store = store
        self._listener = listener

    def create(self, space_key: str, parent_id: str, desired: DesiredPage) -> str:
        """Create a page under parent_id and record its content hash.

        Returns:
            The identifier assigned to the new page by the store
        """
        logger.info(f"Creating page '{desired.title}' under parent {parent_id}")
        page_id = self._store.create_page(space_key, parent_id, desired.title, desired.content)
        self._store.set_property(page_id, CONTENT_HASH_PROPERTY_KEY, content_hash(desired.content))
        self._listener.notify(PageAdded(RemotePage(
            page_id=page_id,
            parent_id=parent_id,
            title=desired.title,
            content=desired.content,
            version=INITIAL_PAGE_VERSION,
        )))
        return page_id

    def synchronize(self, remote: RemotePage, desired: DesiredPage) -> SyncOutcome:
        """Update remote to match desired unless both hash and title match.

        The stale hash property is removed before the update call so that a
        failed update leaves no property rather than a wrong one.

        Args:
            remote: Current snapshot of the page, including its version
            desired: Desired title and content

        Returns:
            SyncOutcome.UPDATED or SyncOutcome.UNCHANGED
        """
        page_id = remote.page_id
        stored_hash = self._store.get_property(page_id, CONTENT_HASH_PROPERTY_KEY)
        new_hash = content_hash(desired.content)

        if stored_hash == new_hash and remote.title == desired.title:
            logger.debug(f"Page '{remote.title}' (id {page_id}) is unchanged")
            return SyncOutcome.UNCHANGED

        if stored_hash is None:
            logger.debug(f"Page {page_id} has no content hash, forcing update")

        self._store.delete_property(page_id, CONTENT_HASH_PROPERTY_KEY)
        new_version = remote.version + 1
        logger.info(
            f"Updating page '{desired.title}' (id {page_id}) to version {new_version}"
        )
        self._store.update_page(page_id, remote.parent_id, desired.title, desired.content, new_version)
        self._store.set_property(page_id, CONTENT_HASH_PROPERTY_KEY, new_hash)

        self._listener.notify(PageUpdated(
            existing=remote,
            updated=RemotePage(
                page_id=page_id,
                parent_id=remote.parent_id,
                title=desired.title,
                content=desired.content,
                version=new_version,
            ),
        ))
        return SyncOutcome.UPDATED
