"""Desired page tree construction from already-rendered pages.

Rendering itself happens elsewhere; this package reads the manifest that
describes the rendered pages, applies title post-processing, and rewrites
attachment and cross-page references for Confluence.
"""

from .content_processor import ContentPostProcessor, derive_attachment_name
from .errors import PageTreeError
from .metadata_loader import MetadataLoader, extract_title
from .title_processor import PageTitlePostProcessor, PrefixAndSuffixPageTitlePostProcessor

__all__ = [
    'ContentPostProcessor',
    'derive_attachment_name',
    'PageTreeError',
    'MetadataLoader',
    'extract_title',
    'PageTitlePostProcessor',
    'PrefixAndSuffixPageTitlePostProcessor',
]
