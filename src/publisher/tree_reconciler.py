"""Recursive reconciliation of a desired page tree against the remote tree.

Each level is processed in two passes. The deletion pass removes every remote
child whose title is not desired, deepest descendants first, and completes
before anything else happens on that level because a new page may reuse a
deleted page's title. The upsert pass then creates or updates each desired
page in order, synchronizes its attachments, and recurses into its children
with the page's remote identifier as the new parent.
"""

import logging
from typing import List, Optional, Sequence

from src.models import DesiredPage, RemotePage
from .attachment_sync import AttachmentSynchronizer
from .errors import AmbiguousPageTitleError
from .events import PageDeleted, PublishListener
from .page_sync import PageSynchronizer, SyncOutcome
from .report import PublishReport
from .store import ContentStore

logger = logging.getLogger(__name__)


class TreeReconciler:
    """Walks the desired tree depth-first, parent before children.

    Example:
        >>> reconciler = TreeReconciler(store, listener, "DOCS")
        >>> reconciler.reconcile(pages, parent_id="123456")
    """

    def __init__(
        self,
        store: ContentStore,
        listener: PublishListener,
        space_key: str,
        report: Optional[PublishReport] = None,
    ):
        self._store = store
        self._listener = listener
        self._space_key = space_key
        self._pages = PageSynchronizer(store, listener)
        self._attachments = AttachmentSynchronizer(store)
        self.report = report if report is not None else PublishReport()

    def reconcile(self, pages: Sequence[DesiredPage], parent_id: str) -> None:
        """Converge the children of parent_id to the desired sibling list.

        Args:
            pages: Desired siblings, titles unique among them
            parent_id: Remote identifier of the parent page

        Raises:
            AmbiguousPageTitleError: If a desired title matches several remote siblings
        """
        remaining = self._delete_pages_not_desired(pages, parent_id)

        for desired in pages:
            matches = [remote for remote in remaining if remote.title == desired.title]
            if len(matches) > 1:
                raise AmbiguousPageTitleError(desired.title, parent_id, len(matches))

            if matches:
                page_id = matches[0].page_id
                self.update_page(matches[0], desired)
            else:
                page_id = self._pages.create(self._space_key, parent_id, desired)
                self.report.added_count += 1

            self.synchronize_attachments(page_id, desired)
            self.reconcile(desired.children, page_id)

    def update_page(self, remote: RemotePage, desired: DesiredPage) -> None:
        """Update a single existing page in place and count the outcome."""
        outcome = self._pages.synchronize(remote, desired)
        if outcome is SyncOutcome.UPDATED:
            self.report.updated_count += 1
        else:
            self.report.unchanged_count += 1

    def synchronize_attachments(self, page_id: str, desired: DesiredPage) -> None:
        """Synchronize the attachments of one page and count the uploads."""
        result = self._attachments.synchronize(page_id, desired.attachments)
        self.report.attachments_uploaded += len(result.added) + len(result.updated)
        self.report.attachments_deleted += len(result.deleted)

    def _delete_pages_not_desired(
        self,
        pages: Sequence[DesiredPage],
        parent_id: str,
    ) -> List[RemotePage]:
        desired_titles = {page.title for page in pages}
        remaining = []

        for remote in self._store.list_children(parent_id):
            if remote.title in desired_titles:
                remaining.append(remote)
            else:
                self._delete_subtree(remote)

        return remaining

    def _delete_subtree(self, page: RemotePage) -> None:
        for child in self._store.list_children(page.page_id):
            self._delete_subtree(child)

        logger.info(f"Deleting page '{page.title}' (id {page.page_id})")
        self._store.delete_page(page.page_id)
        self.report.deleted_count += 1
        self._listener.notify(PageDeleted(page))
