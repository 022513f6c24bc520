"""Summary of one publish run."""

from dataclasses import dataclass


@dataclass
class PublishReport:
    """Counts of pages and attachments touched by a publish run.

    Attributes:
        added_count: Pages created
        updated_count: Pages whose title or content changed
        unchanged_count: Pages left untouched (hash and title matched)
        deleted_count: Pages deleted, descendants included
        attachments_uploaded: Attachments added or re-uploaded
        attachments_deleted: Attachments removed
    """
    added_count: int = 0
    updated_count: int = 0
    unchanged_count: int = 0
    deleted_count: int = 0
    attachments_uploaded: int = 0
    attachments_deleted: int = 0

    @property
    def changed(self) -> bool:
        """True if any remote mutation was issued."""
        return any((
            self.added_count,
            self.updated_count,
            self.deleted_count,
            self.attachments_uploaded,
            self.attachments_deleted,
        ))
