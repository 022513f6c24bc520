"""Publish entry point: strategy selection and lifecycle notifications.

Two strategies are supported:

- APPEND_TO_ANCESTOR: the ancestor page is a fixed root that is never
  renamed or deleted; the desired forest is reconciled directly under it.
- REPLACE_ANCESTOR: the desired tree must have exactly one root. Its children
  are reconciled under the ancestor, then the ancestor itself is updated in
  place to take over the root's title, content and attachments.
"""

import logging
from enum import Enum
from typing import Optional, Sequence

from src.models import DesiredPage
from .errors import PublishConfigurationError
from .events import PublishCompleted, PublishListener
from .report import PublishReport
from .store import ContentStore
from .tree_reconciler import TreeReconciler

logger = logging.getLogger(__name__)


class PublishStrategy(Enum):
    """How the desired tree is placed relative to the ancestor page."""
    APPEND_TO_ANCESTOR = "append_to_ancestor"
    REPLACE_ANCESTOR = "replace_ancestor"

    @classmethod
    def parse(cls, name: Optional[str]) -> 'PublishStrategy':
        """Resolve a strategy name such as 'REPLACE_ANCESTOR' or 'replace-ancestor'.

        Args:
            name: Strategy name, case-insensitive; None selects the default

        Returns:
            The matching PublishStrategy (APPEND_TO_ANCESTOR when name is None)

        Raises:
            PublishConfigurationError: If the name matches no strategy
        """
        if name is None or not name.strip():
            return cls.APPEND_TO_ANCESTOR

        normalized = name.strip().lower().replace('-', '_')
        for strategy in cls:
            if strategy.value == normalized:
                return strategy

        valid = ', '.join(strategy.name for strategy in cls)
        raise PublishConfigurationError(
            f"Invalid publish strategy '{name}' (expected one of: {valid})",
            'strategy'
        )


class ConfluencePublisher:
    """Publishes a desired page tree under an ancestor page.

    Example:
        >>> publisher = ConfluencePublisher(store, listener=LoggingPublishListener())
        >>> report = publisher.publish(pages, "DOCS", "123456")
        >>> print(f"{report.added_count} page(s) added")
    """

    def __init__(self, store: ContentStore, listener: Optional[PublishListener] = None):
        """Initialize the publisher.

        Args:
            store: Content store used for every remote read and mutation
            listener: Receives publish events; defaults to a no-op listener
        """
        self._store = store
        self._listener = listener if listener is not None else PublishListener()

    def publish(
        self,
        pages: Sequence[DesiredPage],
        space_key: str,
        ancestor_id: str,
        strategy: PublishStrategy = PublishStrategy.APPEND_TO_ANCESTOR,
    ) -> PublishReport:
        """Converge the remote tree under ancestor_id to the desired pages.

        Args:
            pages: Desired root pages
            space_key: Space in which new pages are created
            ancestor_id: Existing remote page to publish under
            strategy: Placement strategy

        Returns:
            PublishReport with counts of what changed

        Raises:
            PublishConfigurationError: If space_key or ancestor_id is blank, or
                REPLACE_ANCESTOR is used with more than one root page
            AmbiguousPageTitleError: If remote siblings share a desired title
            ConfluenceError: If any remote operation fails
        """
        _assert_mandatory_parameter(space_key, 'space_key')
        _assert_mandatory_parameter(ancestor_id, 'ancestor_id')
        if not isinstance(strategy, PublishStrategy):
            raise PublishConfigurationError(
                f"Invalid publish strategy defined: {strategy!r}",
                'strategy'
            )

        if strategy is PublishStrategy.REPLACE_ANCESTOR and len(pages) > 1:
            titles = ', '.join(f"'{page.title}'" for page in pages)
            raise PublishConfigurationError(
                f"Multiple root pages detected: {titles}. Publishing to Confluence "
                f"with the {strategy.name} strategy only allows a single root to be defined.",
                'pages'
            )

        logger.info(
            f"Publishing {len(pages)} root page(s) to space {space_key} "
            f"under ancestor {ancestor_id} ({strategy.name})"
        )
        reconciler = TreeReconciler(self._store, self._listener, space_key)

        if strategy is PublishStrategy.APPEND_TO_ANCESTOR:
            reconciler.reconcile(pages, ancestor_id)
        elif pages:
            root = pages[0]
            reconciler.reconcile(root.children, ancestor_id)

            ancestor = self._store.get_page(ancestor_id)
            reconciler.update_page(ancestor, root)
            reconciler.synchronize_attachments(ancestor_id, root)
        else:
            logger.warning("No root page defined, nothing to publish")

        self._listener.notify(PublishCompleted())
        return reconciler.report


def publish(
    pages: Sequence[DesiredPage],
    space_key: str,
    ancestor_id: str,
    store: ContentStore,
    strategy: PublishStrategy = PublishStrategy.APPEND_TO_ANCESTOR,
    listener: Optional[PublishListener] = None,
) -> PublishReport:
    """Publish a desired page tree; see ConfluencePublisher.publish."""
    return ConfluencePublisher(store, listener).publish(pages, space_key, ancestor_id, strategy)


def _assert_mandatory_parameter(value: Optional[str], name: str) -> None:
    if value is None or not str(value).strip():
        raise PublishConfigurationError(f"Mandatory parameter '{name}' is missing", name)
