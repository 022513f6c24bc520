"""Publish lifecycle events and the listener that consumes them.

Events are delivered synchronously, in the exact order the corresponding
operations happen, to a single listener. Listeners only observe: nothing
they do feeds back into reconciliation decisions.
"""

import logging
from dataclasses import dataclass
from typing import List, Union

from src.models import RemotePage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageAdded:
    """A page was created under its parent."""
    page: RemotePage


@dataclass(frozen=True)
class PageUpdated:
    """A page was updated; carries the snapshots before and after."""
    existing: RemotePage
    updated: RemotePage


@dataclass(frozen=True)
class PageDeleted:
    """A page absent from the desired tree was deleted."""
    page: RemotePage


@dataclass(frozen=True)
class PublishCompleted:
    """The publish run finished."""
    pass


PublishEvent = Union[PageAdded, PageUpdated, PageDeleted, PublishCompleted]


class PublishListener:
    """Receives publish events. Every hook is a no-op unless overridden.

    Subclasses override the hooks they care about; the publisher only ever
    calls notify().

    Example:
        >>> class Printer(PublishListener):
        ...     def page_added(self, page):
        ...         print(f"Added {page.title}")
    """

    def notify(self, event: PublishEvent) -> None:
        """Dispatch an event to the matching hook."""
        if isinstance(event, PageAdded):
            self.page_added(event.page)
        elif isinstance(event, PageUpdated):
            self.page_updated(event.existing, event.updated)
        elif isinstance(event, PageDeleted):
            self.page_deleted(event.page)
        elif isinstance(event, PublishCompleted):
            self.publish_completed()
        else:
            raise TypeError(f"Unknown publish event: {event!r}")

    def page_added(self, page: RemotePage) -> None:
        pass

    def page_updated(self, existing: RemotePage, updated: RemotePage) -> None:
        pass

    def page_deleted(self, page: RemotePage) -> None:
        pass

    def publish_completed(self) -> None:
        pass


class RecordingPublishListener(PublishListener):
    """Keeps every event it receives, in delivery order."""

    def __init__(self):
        self.events: List[PublishEvent] = []

    def notify(self, event: PublishEvent) -> None:
        self.events.append(event)
        super().notify(event)


class LoggingPublishListener(PublishListener):
    """Writes one log line per event."""

    def page_added(self, page: RemotePage) -> None:
        logger.info(f"Added page '{page.title}' (id {page.page_id})")

    def page_updated(self, existing: RemotePage, updated: RemotePage) -> None:
        logger.info(
            f"Updated page '{updated.title}' (id {updated.page_id}, "
            f"version {existing.version} -> {updated.version})"
        )

    def page_deleted(self, page: RemotePage) -> None:
        logger.info(f"Deleted page '{page.title}' (id {page.page_id})")

    def publish_completed(self) -> None:
        logger.info("Documentation successfully published to Confluence")
