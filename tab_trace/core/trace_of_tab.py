"""
Main trace-of-tab orchestrator.
"""

import logging
from typing import Callable, Optional, Sequence

from .types import Trace, TraceConfig, TraceEvent, TraceOfTab, TracingStart
from ..extractors.tracing_started import find_tracing_started
from ..processors import NavigationResolver, TimingProjector
from ..telemetry import TelemetrySink, log_sink

logger = logging.getLogger(__name__)

FrameResolver = Callable[[Sequence[TraceEvent]], TracingStart]


class TraceOfTabComputer:
    """
    Extracts the tracked tab's lifecycle from a raw trace.

    1. Find the start event and frame of the tab via the frame resolver.
    2. Find navigationStart and the paint/load markers that follow it.
    3. Isolate the tab process's events (all threads) and its main thread,
       sorted chronologically since capture order isn't guaranteed.
    4. Return everything as one immutable TraceOfTab.
    """

    def __init__(
        self,
        frame_resolver: FrameResolver,
        telemetry: Optional[TelemetrySink] = log_sink,
        config: Optional[TraceConfig] = None
    ):
        """
        Initialize the computer.

        Args:
            frame_resolver: Strategy returning the tab's TracingStart from key events
            telemetry: Sink for non-fatal anomaly reports (None disables reporting)
            config: TraceConfig instance (defaults used when None)
        """
        self.config = config or TraceConfig()
        self.frame_resolver = frame_resolver
        self.navigation_resolver = NavigationResolver(self.config, telemetry)
        self.timing_projector = TimingProjector()

    def compute(self, trace: Trace) -> TraceOfTab:
        """
        Compute the TraceOfTab for a trace.

        Args:
            trace: Trace whose events may be in any order

        Returns:
            TraceOfTab snapshot

        Raises:
            NoNavigationStartError: If the tracked frame has no acceptable navigationStart
            NoFirstContentfulPaintError: If no firstContentfulPaint follows navigationStart
            Any error raised by the frame resolver propagates unchanged.
        """
        trace_events = trace.trace_events

        # Sort *must* be stable to keep events correctly nested
        key_events = self.navigation_resolver.select_key_events(trace_events)

        started_in_page_evt, frame_id = self.frame_resolver(key_events)
        frame_events = self.navigation_resolver.frame_events(key_events, frame_id)
        logger.debug('Tracking frame %s: %d key events, %d in frame',
                     frame_id, len(key_events), len(frame_events))

        markers = self.navigation_resolver.resolve(frame_events)

        process_events = self.navigation_resolver.process_events(trace_events, started_in_page_evt)
        main_thread_events = self.navigation_resolver.main_thread_events(
            process_events, started_in_page_evt
        )

        # At least navigationStart exists here, so the trace is not empty
        trace_end = self.navigation_resolver.trace_end(trace_events)

        timestamps, timings = self.timing_projector.project(markers, trace_end)

        return TraceOfTab(
            timings=timings,
            timestamps=timestamps,
            process_events=tuple(process_events),
            main_thread_events=tuple(main_thread_events),
            started_in_page_evt=started_in_page_evt,
            navigation_start_evt=markers.navigation_start,
            first_paint_evt=markers.first_paint,
            first_contentful_paint_evt=markers.first_contentful_paint,
            first_meaningful_paint_evt=markers.first_meaningful_paint,
            load_evt=markers.load,
            dom_content_loaded_evt=markers.dom_content_loaded,
            fmp_fell_back=markers.fmp_fell_back,
        )


def compute_trace_of_tab(
    trace: Trace,
    frame_resolver: FrameResolver = find_tracing_started,
    telemetry: Optional[TelemetrySink] = log_sink,
    config: Optional[TraceConfig] = None
) -> TraceOfTab:
    """
    Compute the TraceOfTab for a trace with a one-off computer.

    Args:
        trace: Trace to analyze
        frame_resolver: Strategy identifying the tracked tab
        telemetry: Sink for non-fatal anomaly reports
        config: TraceConfig instance

    Returns:
        TraceOfTab snapshot
    """
    return TraceOfTabComputer(frame_resolver, telemetry, config).compute(trace)
