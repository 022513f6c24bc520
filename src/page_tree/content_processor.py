"""Post-processing of rendered page content before publishing.

Rendered pages reference attachments and other pages by relative file path.
Confluence identifies attachments by filename within a page and pages by
title within a space, so both kinds of reference are rewritten here.
"""

import logging
import os
import re
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)

ATTACHMENT_PATH_PATTERN = re.compile(r'<ri:attachment ri:filename="(.*?)"')
PAGE_TITLE_PATTERN = re.compile(r'<ri:page ri:content-title="(.*?)"')

# Only targets that look like rendered files are treated as cross references
_PAGE_FILE_SUFFIXES = ('.html', '.htm', '.xhtml')


def derive_attachment_name(path: str) -> str:
    """Return the filename part of an attachment path ('img/a.png' -> 'a.png')."""
    return path.replace('\\', '/').rsplit('/', 1)[-1]


class ContentPostProcessor:
    """Rewrites attachment and cross-page references of rendered content.

    Attributes:
        titles_by_path: Normalized absolute path of every rendered page file
            mapped to its final page title
    """

    def __init__(self, titles_by_path: Dict[str, str]):
        self.titles_by_path = titles_by_path

    def process(
        self,
        content: str,
        page_path: str,
        page_title: str,
    ) -> Tuple[str, Dict[str, str]]:
        """Rewrite references in the content of one page.

        Attachment references keep only their filename; the filename is
        collected with the source path it came from (resolved against the
        page directory). When two paths share a filename the last one wins.

        Page references naming a rendered file are replaced by the title of
        that page. An unresolvable reference falls back to the referencing
        page's own title.

        Args:
            content: Rendered page content
            page_path: Path of the rendered page file
            page_title: Final title of the page

        Returns:
            Tuple of (processed content, attachments as filename -> source path)
        """
        page_dir = os.path.dirname(os.path.abspath(page_path))
        attachments: Dict[str, str] = {}

        def _collect_attachment(match: re.Match) -> str:
            attachment_path = match.group(1)
            filename = derive_attachment_name(attachment_path)
            attachments[filename] = os.path.normpath(os.path.join(page_dir, attachment_path))
            return f'<ri:attachment ri:filename="{filename}"'

        def _resolve_page_title(match: re.Match) -> str:
            target = match.group(1)
            if not target.lower().endswith(_PAGE_FILE_SUFFIXES):
                return match.group(0)

            referenced = os.path.normpath(os.path.join(page_dir, target))
            title = self.titles_by_path.get(referenced)
            if title is None:
                logger.warning(
                    f"Cross reference '{target}' in {page_path} does not match any "
                    f"published page, using '{page_title}' instead"
                )
                title = page_title
            return f'<ri:page ri:content-title="{title}"'

        processed = ATTACHMENT_PATH_PATTERN.sub(_collect_attachment, content)
        processed = PAGE_TITLE_PATTERN.sub(_resolve_page_title, processed)
        return processed, attachments


def normalize_path(path: str, base_dir: Optional[str] = None) -> str:
    """Absolute, normalized form of path, relative paths taken from base_dir."""
    if base_dir and not os.path.isabs(path):
        path = os.path.join(base_dir, path)
    return os.path.normpath(os.path.abspath(path))
