"""
Pytest configuration and shared fixtures for tab trace analyzer tests.
"""
import json
import pytest

from tab_trace.core.types import Trace, TracingStart
from tab_trace.extractors import EventParser

FRAME_ID = "FRAME-1"
TAB_PID = 1
MAIN_TID = 10
COMPOSITOR_TID = 11


@pytest.fixture
def make_raw_event():
    """Factory for raw Chrome trace event dictionaries."""
    def _make(name, ts, cat="blink.user_timing", pid=TAB_PID, tid=MAIN_TID,
              frame=FRAME_ID, ph="R", dur=None, args=None):
        raw_args = dict(args or {})
        if frame is not None:
            raw_args.setdefault("frame", frame)
        raw = {"name": name, "cat": cat, "pid": pid, "tid": tid, "ts": ts, "ph": ph, "args": raw_args}
        if dur is not None:
            raw["dur"] = dur
        return raw

    return _make


@pytest.fixture
def make_event(make_raw_event):
    """Factory for parsed TraceEvent records."""
    parser = EventParser()

    def _make(name, ts, **kwargs):
        return parser.parse_event(make_raw_event(name, ts, **kwargs))

    return _make


@pytest.fixture
def navigation_start_raw(make_raw_event):
    """Factory for navigationStart events carrying a document URL."""
    def _make(ts, url="https://example.com/", **kwargs):
        args = {"data": {"documentLoaderURL": url}} if url is not None else {}
        return make_raw_event("navigationStart", ts, args=args, **kwargs)

    return _make


@pytest.fixture
def tracing_started_raw(make_raw_event):
    """TracingStartedInPage event for the tab's main thread."""
    return make_raw_event(
        "TracingStartedInPage", 500,
        cat="disabled-by-default-devtools.timeline", ph="I", frame=None,
        args={"data": {"page": FRAME_ID, "sessionId": "1.1"}}
    )


@pytest.fixture
def sample_raw_events(make_raw_event, navigation_start_raw, tracing_started_raw):
    """A small, deliberately unordered trace of one page load."""
    return [
        make_raw_event("firstContentfulPaint", 2500, cat="loading,rail,devtools.timeline"),
        make_raw_event("thread_name", 0, cat="__metadata", ph="M", frame=None,
                       args={"name": "CrRendererMain"}),
        make_raw_event("firstPaint", 2000, cat="loading,rail,devtools.timeline"),
        navigation_start_raw(1000),
        tracing_started_raw,
        make_raw_event("firstMeaningfulPaint", 3000, cat="loading,rail,devtools.timeline"),
        make_raw_event("RunTask", 1500, cat="toplevel", ph="X", dur=300, frame=None),
        make_raw_event("CompositeLayers", 1600, cat="devtools.timeline", ph="X", dur=50,
                       tid=COMPOSITOR_TID, frame=None),
        make_raw_event("domContentLoadedEventEnd", 4000),
        make_raw_event("loadEventEnd", 5000),
        make_raw_event("RunTask", 1200, cat="toplevel", ph="X", dur=9000, pid=2, tid=20, frame=None),
        make_raw_event("firstPaint", 2100, cat="loading,rail,devtools.timeline", frame="FRAME-2"),
    ]


@pytest.fixture
def sample_trace(sample_raw_events):
    """Parsed Trace built from sample_raw_events."""
    parser = EventParser()
    return Trace(trace_events=[parser.parse_event(raw) for raw in sample_raw_events])


@pytest.fixture
def static_frame_resolver(make_event):
    """Frame resolver stub that always tracks FRAME-1 on the tab's main thread."""
    start_event = make_event("TracingStartedInPage", 500, frame=None,
                             cat="disabled-by-default-devtools.timeline", ph="I")

    def _resolve(key_events):
        return TracingStart(event=start_event, frame_id=FRAME_ID)

    return _resolve


@pytest.fixture
def captured_reports():
    """Telemetry sink recording every report it receives."""
    reports = []

    def _sink(message, level):
        reports.append((message, level))

    _sink.reports = reports
    return _sink


@pytest.fixture
def trace_file(tmp_path, sample_raw_events):
    """Write sample_raw_events to a trace JSON file in the object layout."""
    file_path = tmp_path / "trace.json"
    with open(file_path, "w") as f:
        json.dump({"traceEvents": sample_raw_events, "metadata": {"source": "test"}}, f)
    return str(file_path)


@pytest.fixture
def temp_json_file(tmp_path):
    """Create a temporary JSON file and return a helper function."""
    def _create_file(data, name=None):
        file_path = tmp_path / (name or f"test_{id(data)}.json")
        with open(file_path, "w") as f:
            json.dump(data, f)
        return str(file_path)

    return _create_file
