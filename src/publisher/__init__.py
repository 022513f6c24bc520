"""Reconciliation engine that publishes a desired page tree to Confluence.

The engine walks the desired tree depth-first, deletes remote pages that are
no longer desired, creates or updates the rest using a content hash stored as
a page property for idempotence, and synchronizes page attachments.
"""

from .attachment_sync import AttachmentSynchronizer, AttachmentSyncResult
from .errors import (
    PublishError,
    PublishConfigurationError,
    AmbiguousPageTitleError,
    AttachmentSourceError,
)
from .events import (
    PageAdded,
    PageUpdated,
    PageDeleted,
    PublishCompleted,
    PublishListener,
    RecordingPublishListener,
    LoggingPublishListener,
)
from .fingerprint import CONTENT_HASH_PROPERTY_KEY, content_hash, stream_digest
from .orchestrator import ConfluencePublisher, PublishStrategy, publish
from .page_sync import PageSynchronizer, SyncOutcome
from .report import PublishReport
from .store import ContentStore
from .tree_reconciler import TreeReconciler

__all__ = [
    'AttachmentSynchronizer',
    'AttachmentSyncResult',
    'PublishError',
    'PublishConfigurationError',
    'AmbiguousPageTitleError',
    'AttachmentSourceError',
    'PageAdded',
    'PageUpdated',
    'PageDeleted',
    'PublishCompleted',
    'PublishListener',
    'RecordingPublishListener',
    'LoggingPublishListener',
    'CONTENT_HASH_PROPERTY_KEY',
    'content_hash',
    'stream_digest',
    'ConfluencePublisher',
    'PublishStrategy',
    'publish',
    'PageSynchronizer',
    'SyncOutcome',
    'PublishReport',
    'ContentStore',
    'TreeReconciler',
]
