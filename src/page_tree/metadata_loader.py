"""Desired page tree loading from a metadata manifest.

The manifest describes the tree of already-rendered pages to publish. It is
YAML (JSON is accepted too, being a subset of YAML):

    pages:
      - title: "User Guide"          # optional, derived from <title>/<h1>
        content: guide/index.html    # rendered page, relative to the manifest
        attachments:                 # optional: filename -> path, or list of paths
          logo.png: assets/logo.png
        children:
          - content: guide/install.html

The whole tree is read and validated before anything is published, so
problems surface before the first remote call.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml
from bs4 import BeautifulSoup

from src.models import DesiredPage
from .content_processor import ContentPostProcessor, derive_attachment_name, normalize_path
from .errors import PageTreeError
from .title_processor import PageTitlePostProcessor

logger = logging.getLogger(__name__)

MAX_DEPTH = 50


@dataclass
class _PageEntry:
    """Manifest entry with its rendered content read but not yet processed."""
    title: str
    content_path: str
    content: str
    attachments: Dict[str, str]
    children: List['_PageEntry'] = field(default_factory=list)


class MetadataLoader:
    """Builds the desired page tree from a manifest file.

    Example:
        >>> pages = MetadataLoader.load("build/pages.yaml")
        >>> print([page.title for page in pages])
    """

    @classmethod
    def load(
        cls,
        manifest_path: str,
        title_processor: Optional[PageTitlePostProcessor] = None,
        source_encoding: str = 'utf-8',
    ) -> List[DesiredPage]:
        """Load the manifest and every rendered page it references.

        Args:
            manifest_path: Path to the YAML/JSON manifest
            title_processor: Applied to every title; identity by default
            source_encoding: Encoding of the rendered page files

        Returns:
            Root DesiredPage list, children nested in manifest order

        Raises:
            PageTreeError: If the manifest or a referenced file is unusable,
                or if sibling titles collide
        """
        title_processor = title_processor or PageTitlePostProcessor()
        manifest = cls._read_manifest(manifest_path)
        base_dir = os.path.dirname(os.path.abspath(manifest_path))

        pages_raw = manifest.get('pages')
        if not isinstance(pages_raw, list):
            raise PageTreeError("Field 'pages' must be a list", manifest_path)

        entries = [
            cls._parse_entry(raw, base_dir, title_processor, source_encoding, f"pages[{i}]", 1)
            for i, raw in enumerate(pages_raw)
        ]
        _check_unique_titles(entries, "root")

        titles_by_path: Dict[str, str] = {}
        _collect_titles(entries, titles_by_path)
        processor = ContentPostProcessor(titles_by_path)

        pages = [_to_desired_page(entry, processor) for entry in entries]
        logger.info(f"Loaded {_count(pages)} page(s) from {manifest_path}")
        return pages

    @classmethod
    def _read_manifest(cls, manifest_path: str) -> Dict[str, Any]:
        try:
            with open(manifest_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            raise PageTreeError("Manifest file not found", manifest_path)
        except OSError as e:
            raise PageTreeError(f"Cannot read manifest: {e}", manifest_path)

        try:
            manifest = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise PageTreeError(f"Invalid YAML syntax: {e}", manifest_path)

        if manifest is None:
            raise PageTreeError("Manifest file is empty", manifest_path)
        if not isinstance(manifest, dict):
            raise PageTreeError(
                f"Manifest must be a dictionary, got {type(manifest).__name__}",
                manifest_path
            )
        return manifest

    @classmethod
    def _parse_entry(
        cls,
        raw: Any,
        base_dir: str,
        title_processor: PageTitlePostProcessor,
        source_encoding: str,
        location: str,
        depth: int,
    ) -> _PageEntry:
        if depth > MAX_DEPTH:
            raise PageTreeError(f"Page tree is nested deeper than {MAX_DEPTH} levels", location)
        if not isinstance(raw, dict):
            raise PageTreeError("Page entry must be a dictionary", location)

        content_file = raw.get('content')
        if not isinstance(content_file, str) or not content_file.strip():
            raise PageTreeError("Field 'content' is required", location)

        content_path = normalize_path(content_file, base_dir)
        try:
            with open(content_path, 'r', encoding=source_encoding) as f:
                content = f.read()
        except OSError as e:
            raise PageTreeError(f"Cannot read rendered page: {e.strerror or e}", content_path)
        except UnicodeDecodeError as e:
            raise PageTreeError(f"Cannot decode rendered page as {source_encoding}: {e}", content_path)

        title = raw.get('title')
        if title is None:
            title = extract_title(content)
            if title is None:
                raise PageTreeError("Top-level heading or title must be set", content_path)
        elif not isinstance(title, str) or not title.strip():
            raise PageTreeError("Field 'title' must be a non-empty string", location)

        children_raw = raw.get('children') or []
        if not isinstance(children_raw, list):
            raise PageTreeError("Field 'children' must be a list", location)

        entry = _PageEntry(
            title=title_processor.process(title.strip()),
            content_path=content_path,
            content=content,
            attachments=_parse_attachments(raw.get('attachments'), base_dir, location),
        )
        entry.children = [
            cls._parse_entry(
                child, base_dir, title_processor, source_encoding,
                f"{location}.children[{i}]", depth + 1
            )
            for i, child in enumerate(children_raw)
        ]
        _check_unique_titles(entry.children, f"'{entry.title}'")
        return entry


def extract_title(content: str) -> Optional[str]:
    """Return the text of the first <title> or <h1> of rendered content."""
    soup = BeautifulSoup(content, "html.parser")
    for tag_name in ('title', 'h1'):
        tag = soup.find(tag_name)
        if tag is not None:
            text = tag.get_text(" ", strip=True)
            if text:
                return text
    return None


def _parse_attachments(raw: Any, base_dir: str, location: str) -> Dict[str, str]:
    if raw is None:
        return {}
    if isinstance(raw, list):
        return {derive_attachment_name(str(path)): normalize_path(str(path), base_dir) for path in raw}
    if isinstance(raw, dict):
        return {str(name): normalize_path(str(path), base_dir) for name, path in raw.items()}
    raise PageTreeError("Field 'attachments' must be a list or a dictionary", location)


def _check_unique_titles(entries: List[_PageEntry], parent: str) -> None:
    seen = set()
    for entry in entries:
        if entry.title in seen:
            raise PageTreeError(f"Duplicate page title '{entry.title}' under {parent}")
        seen.add(entry.title)


def _collect_titles(entries: List[_PageEntry], titles_by_path: Dict[str, str]) -> None:
    for entry in entries:
        titles_by_path[entry.content_path] = entry.title
        _collect_titles(entry.children, titles_by_path)


def _to_desired_page(entry: _PageEntry, processor: ContentPostProcessor) -> DesiredPage:
    content, referenced = processor.process(entry.content, entry.content_path, entry.title)
    attachments = dict(entry.attachments)
    attachments.update(referenced)
    return DesiredPage(
        title=entry.title,
        content=content,
        attachments=attachments,
        children=[_to_desired_page(child, processor) for child in entry.children],
    )


def _count(pages: List[DesiredPage]) -> int:
    return sum(1 + _count(page.children) for page in pages)
