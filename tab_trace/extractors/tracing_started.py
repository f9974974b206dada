"""
Default frame-resolution strategy: find where tracing of the tab started.
"""

from typing import Optional, Sequence

from ..core.errors import NoTracingStartedError
from ..core.types import MetadataArgs, TraceEvent, TracingStart, TracingStartedArgs

RENDERER_MAIN_THREAD = 'CrRendererMain'


def _find_started_in_page(events: Sequence[TraceEvent]) -> Optional[TracingStart]:
    event = next((e for e in events if e.name == 'TracingStartedInPage'), None)
    if event is None or not isinstance(event.args, TracingStartedArgs):
        return None
    if not event.args.page:
        return None
    return TracingStart(event=event, frame_id=event.args.page)


def _find_started_in_browser(events: Sequence[TraceEvent]) -> Optional[TracingStart]:
    """
    Newer Chrome emits TracingStartedInBrowser with a frame list instead.

    The main frame is the one without a parent; its renderer main thread is
    identified through the thread_name metadata of that process.
    """
    event = next((e for e in events if e.name == 'TracingStartedInBrowser'), None)
    if event is None or not isinstance(event.args, TracingStartedArgs):
        return None

    main_frame = next((f for f in event.args.frames if not f.parent), None)
    if main_frame is None or not main_frame.frame or main_frame.process_id is None:
        return None

    pid = main_frame.process_id
    thread_name_evt = next(
        (
            e for e in events
            if e.pid == pid
            and e.ph == 'M'
            and e.name == 'thread_name'
            and isinstance(e.args, MetadataArgs)
            and e.args.name == RENDERER_MAIN_THREAD
        ),
        None
    )
    if thread_name_evt is None:
        return None

    start_event = TraceEvent(
        name=event.name,
        categories=event.categories,
        pid=pid,
        tid=thread_name_evt.tid,
        ts=event.ts,
        ph=event.ph,
        args=event.args
    )
    return TracingStart(event=start_event, frame_id=main_frame.frame)


def find_tracing_started(events: Sequence[TraceEvent]) -> TracingStart:
    """
    Identify the tracked tab's start event and frame.

    Args:
        events: Chronologically sorted key events

    Returns:
        TracingStart(event, frame_id)

    Raises:
        NoTracingStartedError: If neither strategy finds the tab
    """
    result = _find_started_in_page(events) or _find_started_in_browser(events)
    if result is None:
        raise NoTracingStartedError()
    return result
