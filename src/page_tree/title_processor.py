"""Page title post-processing applied to every desired page title."""

from typing import Optional


class PageTitlePostProcessor:
    """Returns titles unchanged."""

    def process(self, title: str) -> str:
        return title


class PrefixAndSuffixPageTitlePostProcessor(PageTitlePostProcessor):
    """Wraps every title with a fixed prefix and suffix.

    Useful to keep titles unique when the same documentation is published
    into several places of one space (titles are unique per space).

    Example:
        >>> PrefixAndSuffixPageTitlePostProcessor("[v2] ", None).process("Guide")
        '[v2] Guide'
    """

    def __init__(self, prefix: Optional[str] = None, suffix: Optional[str] = None):
        self.prefix = prefix or ""
        self.suffix = suffix or ""

    def process(self, title: str) -> str:
        return f"{self.prefix}{title}{self.suffix}"
