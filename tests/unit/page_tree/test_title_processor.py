"""Unit tests for page_tree.title_processor module."""

from src.page_tree.title_processor import (
    PageTitlePostProcessor,
    PrefixAndSuffixPageTitlePostProcessor,
)


class TestPageTitlePostProcessor:

    def test_identity(self):
        assert PageTitlePostProcessor().process("Guide") == "Guide"


class TestPrefixAndSuffixPageTitlePostProcessor:

    def test_prefix_and_suffix(self):
        processor = PrefixAndSuffixPageTitlePostProcessor("Doc - ", " (v2)")
        assert processor.process("Guide") == "Doc - Guide (v2)"

    def test_none_values_are_empty(self):
        assert PrefixAndSuffixPageTitlePostProcessor(None, None).process("Guide") == "Guide"

    def test_prefix_only(self):
        assert PrefixAndSuffixPageTitlePostProcessor(prefix="[draft] ").process("Guide") == "[draft] Guide"
