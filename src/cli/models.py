"""Data models for CLI operations."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Publish completed successfully
    - GENERAL_ERROR (1): Configuration, page tree or API failure
    - AMBIGUOUS_PAGES (2): Duplicate page titles found in Confluence
    - AUTH_ERROR (3): Authentication or authorization failure
    - NETWORK_ERROR (4): Network connectivity or API availability issues

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    AMBIGUOUS_PAGES = 2
    AUTH_ERROR = 3
    NETWORK_ERROR = 4


@dataclass
class PublishConfig:
    """Settings of one publish run, from the config file and CLI options.

    Attributes:
        manifest: Path to the page metadata manifest
        space_key: Space in which new pages are created (e.g., "DOCS")
        ancestor_id: Existing page under which the tree is published
        strategy: Publish strategy name (APPEND_TO_ANCESTOR or REPLACE_ANCESTOR)
        page_title_prefix: Prefix added to every page title
        page_title_suffix: Suffix added to every page title
        source_encoding: Encoding of the rendered page files
        confluence_url: Confluence base URL (falls back to CONFLUENCE_URL)
    """
    manifest: Optional[str] = None
    space_key: Optional[str] = None
    ancestor_id: Optional[str] = None
    strategy: Optional[str] = None
    page_title_prefix: Optional[str] = None
    page_title_suffix: Optional[str] = None
    source_encoding: str = "utf-8"
    confluence_url: Optional[str] = None
