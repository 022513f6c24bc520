"""Unit tests for cli.output module."""

from unittest.mock import Mock

import pytest

from src.cli.output import ConsoleReportingListener, OutputHandler
from src.models import RemotePage
from src.publisher.events import PageAdded, PageDeleted, PageUpdated, PublishCompleted
from src.publisher.report import PublishReport


@pytest.fixture
def handler():
    handler = OutputHandler(verbosity=0, no_color=True)
    handler.console = Mock()
    return handler


def printed(handler):
    return [str(call.args[0]) if call.args else "" for call in handler.console.print.call_args_list]


class TestOutputHandler:
    """Test cases for OutputHandler message methods."""

    def test_info_hidden_at_verbosity_0(self, handler):
        handler.info("details")
        handler.console.print.assert_not_called()

    def test_info_shown_at_verbosity_1(self, handler):
        handler.verbosity = 1
        handler.info("details")
        handler.console.print.assert_called_once_with("details")

    def test_debug_requires_verbosity_2(self, handler):
        handler.verbosity = 1
        handler.debug("trace")
        handler.console.print.assert_not_called()

        handler.verbosity = 2
        handler.debug("trace")
        assert "trace" in printed(handler)[0]

    def test_error_and_success_always_shown(self, handler):
        handler.error("bad")
        handler.success("good")

        lines = printed(handler)
        assert "bad" in lines[0]
        assert "good" in lines[1]

    def test_no_color_console(self):
        handler = OutputHandler(no_color=True)
        assert handler.console.no_color is True


class TestPrintPublishSummary:
    """Test cases for OutputHandler.print_publish_summary."""

    def test_nothing_changed_message(self, handler):
        handler.print_publish_summary(PublishReport(unchanged_count=3))

        assert any("Already up to date" in line for line in printed(handler))

    def test_changes_omit_up_to_date_message(self, handler):
        handler.print_publish_summary(PublishReport(added_count=1, deleted_count=2))

        assert not any("Already up to date" in line for line in printed(handler))


class TestConsoleReportingListener:
    """Test cases for ConsoleReportingListener."""

    def test_prints_each_event(self, handler):
        listener = ConsoleReportingListener(handler)
        before = RemotePage("7", "1", "Guide", "", 2)
        after = RemotePage("7", "1", "Guide", "<p/>", 3)

        listener.notify(PageAdded(RemotePage("8", "1", "New")))
        listener.notify(PageUpdated(before, after))
        listener.notify(PageDeleted(RemotePage("9", "1", "Old")))
        listener.notify(PublishCompleted())

        lines = printed(handler)
        assert lines[0] == "Added page 'New' (id 8)"
        assert lines[1] == "Updated page 'Guide' (id 7, version 2 -> 3)"
        assert lines[2] == "Deleted page 'Old' (id 9)"
        assert "successfully published" in lines[3]

    def test_titles_are_escaped_for_markup(self, handler):
        ConsoleReportingListener(handler).notify(PageAdded(RemotePage("8", "1", "[draft] Notes")))

        assert printed(handler)[0] == "Added page '\\[draft] Notes' (id 8)"
