"""
Filtered stable sort of trace events by timestamp.
"""

from typing import Callable, List, Sequence

from ..core.types import TraceEvent


def filtered_stable_sort(
    trace_events: Sequence[TraceEvent],
    predicate: Callable[[TraceEvent], bool]
) -> List[TraceEvent]:
    """
    Keep the events matching the predicate, ordered by timestamp.

    Events sharing a timestamp keep their input order, which keeps nested
    begin/end spans correctly nested.

    Args:
        trace_events: Events in capture order
        predicate: Returns True for events to keep

    Returns:
        New list of matching events in ascending ts order
    """
    indices = [index for index, event in enumerate(trace_events) if predicate(event)]

    # Ties on ts fall back to the original position
    indices.sort(key=lambda index: (trace_events[index].ts, index))

    return [trace_events[index] for index in indices]
