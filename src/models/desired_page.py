"""Desired page tree computed locally before publishing."""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class DesiredPage:
    """Target state of one page, built once per run and never mutated.

    Attributes:
        title: Page title, unique among its siblings
        content: Rendered page content in storage format (XHTML)
        attachments: Mapping of attachment filename to local source path,
            in publish order
        children: Child pages, in publish order
    """
    title: str
    content: str
    attachments: Dict[str, str] = field(default_factory=dict)
    children: List['DesiredPage'] = field(default_factory=list)
