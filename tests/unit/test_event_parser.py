"""
Unit tests for tab_trace.extractors.event_parser module.
"""
import dataclasses

import pytest
from tab_trace.core.types import EventArgs, MetadataArgs, NavigationArgs, TracingStartedArgs
from tab_trace.extractors.event_parser import EventParser


@pytest.fixture
def parser():
    return EventParser()


class TestParseCategories:
    """Tests for the parse_categories() static method."""

    def test_comma_separated(self):
        """Test splitting of Chrome's category string."""
        assert EventParser.parse_categories("loading,rail,devtools.timeline") == frozenset(
            {"loading", "rail", "devtools.timeline"}
        )

    def test_whitespace_and_empty_parts(self):
        """Test that stray spaces and empty entries are dropped."""
        assert EventParser.parse_categories(" loading, ,rail,") == frozenset({"loading", "rail"})

    def test_missing(self):
        """Test that missing categories yield an empty set."""
        assert EventParser.parse_categories(None) == frozenset()
        assert EventParser.parse_categories("") == frozenset()


class TestParseEvent:
    """Tests for the parse_event() method."""

    def test_basic_fields(self, parser):
        """Test that the common fields are copied."""
        event = parser.parse_event({
            "name": "RunTask", "cat": "toplevel", "pid": 3, "tid": 7,
            "ts": 1234, "dur": 56, "ph": "X", "args": {}
        })
        assert event.name == "RunTask"
        assert event.categories == frozenset({"toplevel"})
        assert (event.pid, event.tid, event.ts, event.dur, event.ph) == (3, 7, 1234, 56, "X")
        assert event.end_ts == 1290
        assert type(event.args) is EventArgs

    def test_missing_fields_default(self, parser):
        """Test defaults for sparse events."""
        event = parser.parse_event({"name": "x"})
        assert event.ts == 0
        assert event.dur is None
        assert event.end_ts == 0
        assert event.args.frame_id is None

    def test_navigation_start_args(self, parser):
        """Test that navigationStart carries its document URL."""
        event = parser.parse_event({
            "name": "navigationStart", "cat": "blink.user_timing", "pid": 1, "tid": 1, "ts": 10,
            "args": {"frame": "F", "data": {"documentLoaderURL": "https://example.com/", "isLoadingMainFrame": True}}
        })
        assert isinstance(event.args, NavigationArgs)
        assert event.args.frame_id == "F"
        assert event.args.document_loader_url == "https://example.com/"
        assert event.args.data["data"]["isLoadingMainFrame"] is True

    def test_navigation_start_without_data(self, parser):
        """Test that navigationStart without data has no URL."""
        event = parser.parse_event({"name": "navigationStart", "ts": 10, "args": {"frame": "F"}})
        assert event.args.document_loader_url is None

    def test_metadata_args(self, parser):
        """Test that metadata events expose their name."""
        event = parser.parse_event({
            "name": "thread_name", "cat": "__metadata", "ph": "M", "pid": 1, "tid": 2,
            "ts": 0, "args": {"name": "CrRendererMain"}
        })
        assert isinstance(event.args, MetadataArgs)
        assert event.args.name == "CrRendererMain"

    def test_tracing_started_in_browser_args(self, parser):
        """Test that the frame list is parsed."""
        event = parser.parse_event({
            "name": "TracingStartedInBrowser", "cat": "disabled-by-default-devtools.timeline",
            "ph": "I", "pid": 100, "tid": 1, "ts": 5,
            "args": {"data": {"frames": [
                {"frame": "MAIN", "processId": 7, "url": "https://example.com/"},
                {"frame": "SUB", "processId": 8, "parent": "MAIN"},
            ]}}
        })
        assert isinstance(event.args, TracingStartedArgs)
        assert [f.frame for f in event.args.frames] == ["MAIN", "SUB"]
        assert event.args.frames[0].process_id == 7
        assert event.args.frames[0].parent is None
        assert event.args.frames[1].parent == "MAIN"

    def test_tracing_started_in_page_args(self, parser):
        """Test that the page frame id is parsed."""
        event = parser.parse_event({
            "name": "TracingStartedInPage", "ts": 5, "args": {"data": {"page": "PAGE"}}
        })
        assert event.args.page == "PAGE"
        assert event.args.frames == ()

    def test_malformed_args(self, parser):
        """Test that non-dict args are tolerated."""
        event = parser.parse_event({"name": "navigationStart", "ts": 1, "args": {"data": "oops"}})
        assert event.args.document_loader_url is None

    def test_events_are_immutable(self, parser):
        """Test that parsed events and their args cannot be modified."""
        event = parser.parse_event({"name": "x", "ts": 1, "args": {"frame": "F"}})
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.ts = 2
        with pytest.raises(TypeError):
            event.args.data["frame"] = "G"

    def test_raw_args_not_shared(self, parser):
        """Test that later changes to the raw dict do not leak into the event."""
        raw = {"name": "x", "ts": 1, "args": {"frame": "F"}}
        event = parser.parse_event(raw)
        raw["args"]["frame"] = "G"
        assert event.args.data["frame"] == "F"
