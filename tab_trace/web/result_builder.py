"""
Result builder for JSON and CLI output.
"""

from typing import Any, Dict, Optional

from ..core.types import TraceEvent, TraceOfTab
from ..formatters import format_timing


def serialize_event(event: Optional[TraceEvent]) -> Optional[Dict[str, Any]]:
    """Convert a marker event to a plain dictionary (None stays None)."""
    if event is None:
        return None
    return {
        'name': event.name,
        'cat': ','.join(sorted(event.categories)),
        'pid': event.pid,
        'tid': event.tid,
        'ts': event.ts,
        'dur': event.dur,
        'frame': event.args.frame_id,
    }


def prepare_results(trace_of_tab: TraceOfTab, include_events: bool = False) -> Dict[str, Any]:
    """
    Convert a TraceOfTab to a structured format for JSON output.

    Args:
        trace_of_tab: Computed TraceOfTab
        include_events: If True, also serialize every main-thread event

    Returns:
        Dictionary with timings, timestamps, marker events and event counts
    """
    timings = trace_of_tab.timings.to_dict()

    markers = {
        'navigationStart': serialize_event(trace_of_tab.navigation_start_evt),
        'firstPaint': serialize_event(trace_of_tab.first_paint_evt),
        'firstContentfulPaint': serialize_event(trace_of_tab.first_contentful_paint_evt),
        'firstMeaningfulPaint': serialize_event(trace_of_tab.first_meaningful_paint_evt),
        'load': serialize_event(trace_of_tab.load_evt),
        'domContentLoaded': serialize_event(trace_of_tab.dom_content_loaded_evt),
    }

    results = {
        'timings': timings,
        'timings_formatted': {key: format_timing(value) for key, value in timings.items()},
        'timestamps': trace_of_tab.timestamps.to_dict(),
        'markers': markers,
        'started_in_page': serialize_event(trace_of_tab.started_in_page_evt),
        'fmp_fell_back': trace_of_tab.fmp_fell_back,
        'process_event_count': len(trace_of_tab.process_events),
        'main_thread_event_count': len(trace_of_tab.main_thread_events),
    }

    if include_events:
        results['main_thread_events'] = [serialize_event(e) for e in trace_of_tab.main_thread_events]

    return results
