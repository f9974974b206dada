"""
Locate the tracked frame's lifecycle markers in a trace.
"""

import logging
import re
from typing import List, Optional, Sequence, Tuple

from ..core.errors import NoFirstContentfulPaintError, NoNavigationStartError
from ..core.types import LifecycleMarkers, NavigationArgs, TraceConfig, TraceEvent, Timestamp
from ..telemetry import TelemetrySink, report
from .stable_sort import filtered_stable_sort

logger = logging.getLogger(__name__)

NAVIGATION_START = 'navigationStart'
FIRST_PAINT = 'firstPaint'
FIRST_CONTENTFUL_PAINT = 'firstContentfulPaint'
FIRST_MEANINGFUL_PAINT = 'firstMeaningfulPaint'
FIRST_MEANINGFUL_PAINT_CANDIDATE = 'firstMeaningfulPaintCandidate'
LOAD_EVENT_END = 'loadEventEnd'
DOM_CONTENT_LOADED_EVENT_END = 'domContentLoadedEventEnd'


class NavigationResolver:
    """Finds navigation start and the lifecycle markers that follow it."""

    def __init__(self, config: Optional[TraceConfig] = None, telemetry: Optional[TelemetrySink] = None):
        """
        Initialize with trace configuration.

        Args:
            config: TraceConfig instance (defaults used when None)
            telemetry: Sink for non-fatal anomaly reports
        """
        self.config = config or TraceConfig()
        self.telemetry = telemetry
        self._acceptable_url = re.compile(self.config.acceptable_navigation_url)

    def is_key_event(self, event: TraceEvent) -> bool:
        """
        True for marker-bearing categories and pure metadata events.

        Key categories match as substrings so that variants such as
        'disabled-by-default-devtools.timeline' are kept too.
        """
        if event.categories == {self.config.metadata_category}:
            return True
        return any(
            key in category
            for category in event.categories
            for key in self.config.key_categories
        )

    def select_key_events(self, trace_events: Sequence[TraceEvent]) -> List[TraceEvent]:
        """Stable-sort the trace down to markers and metadata."""
        return filtered_stable_sort(trace_events, self.is_key_event)

    @staticmethod
    def frame_events(key_events: Sequence[TraceEvent], frame_id: str) -> List[TraceEvent]:
        """Events belonging to the given frame, order preserved."""
        return [e for e in key_events if e.args.frame_id == frame_id]

    def is_navigation_start_of_interest(self, event: TraceEvent) -> bool:
        """
        True if the event is a navigation start of a document whose URL seems valid.

        A navigationStart without a document URL is accepted.
        """
        if event.name != NAVIGATION_START:
            return False
        url = event.args.document_loader_url if isinstance(event.args, NavigationArgs) else None
        return not url or bool(self._acceptable_url.match(url))

    def find_navigation_start(self, frame_events: Sequence[TraceEvent]) -> TraceEvent:
        """
        The last acceptable navigation in the frame.

        Raises:
            NoNavigationStartError: If the frame has no acceptable navigationStart
        """
        candidates = [e for e in frame_events if self.is_navigation_start_of_interest(e)]
        if not candidates:
            raise NoNavigationStartError()
        return candidates[-1]

    @staticmethod
    def find_first_after(
        frame_events: Sequence[TraceEvent],
        name: str,
        navigation_start: TraceEvent
    ) -> Optional[TraceEvent]:
        """First event with the given name strictly after navigation start."""
        for event in frame_events:
            if event.name == name and event.ts > navigation_start.ts:
                return event
        return None

    def find_first_meaningful_paint(
        self,
        frame_events: Sequence[TraceEvent],
        navigation_start: TraceEvent
    ) -> Tuple[Optional[TraceEvent], bool]:
        """
        Find firstMeaningfulPaint, falling back to the last candidate.

        Network idle detection may not have fired before tracing stopped, in
        which case the last firstMeaningfulPaintCandidate stands in for it.

        Returns:
            Tuple of (event or None, fell_back)
        """
        first_meaningful_paint = self.find_first_after(
            frame_events, FIRST_MEANINGFUL_PAINT, navigation_start
        )
        if first_meaningful_paint:
            return first_meaningful_paint, False

        report(self.telemetry, 'No firstMeaningfulPaint found, using fallback', 'warning')
        logger.debug('No %s found, falling back to last %s',
                     FIRST_MEANINGFUL_PAINT, FIRST_MEANINGFUL_PAINT_CANDIDATE)

        # Candidates are not required to follow navigation start
        candidates = [e for e in frame_events if e.name == FIRST_MEANINGFUL_PAINT_CANDIDATE]
        if not candidates:
            logger.debug('No %s events found in trace', FIRST_MEANINGFUL_PAINT_CANDIDATE)
            return None, True
        return candidates[-1], True

    def resolve(self, frame_events: Sequence[TraceEvent]) -> LifecycleMarkers:
        """
        Find all lifecycle markers of the tracked frame.

        Args:
            frame_events: Chronologically sorted events of the tracked frame

        Returns:
            LifecycleMarkers for the frame

        Raises:
            NoNavigationStartError: If no acceptable navigationStart exists
            NoFirstContentfulPaintError: If no firstContentfulPaint follows it
        """
        navigation_start = self.find_navigation_start(frame_events)

        first_paint = self.find_first_after(frame_events, FIRST_PAINT, navigation_start)

        # FCP is load-bearing for consumers, so it is required
        first_contentful_paint = self.find_first_after(
            frame_events, FIRST_CONTENTFUL_PAINT, navigation_start
        )
        if not first_contentful_paint:
            raise NoFirstContentfulPaintError()

        first_meaningful_paint, fmp_fell_back = self.find_first_meaningful_paint(
            frame_events, navigation_start
        )

        return LifecycleMarkers(
            navigation_start=navigation_start,
            first_paint=first_paint,
            first_contentful_paint=first_contentful_paint,
            first_meaningful_paint=first_meaningful_paint,
            load=self.find_first_after(frame_events, LOAD_EVENT_END, navigation_start),
            dom_content_loaded=self.find_first_after(
                frame_events, DOM_CONTENT_LOADED_EVENT_END, navigation_start
            ),
            fmp_fell_back=fmp_fell_back
        )

    @staticmethod
    def process_events(trace_events: Sequence[TraceEvent], start_event: TraceEvent) -> List[TraceEvent]:
        """All events of the tab's process (every thread), chronologically."""
        return filtered_stable_sort(trace_events, lambda e: e.pid == start_event.pid)

    @staticmethod
    def main_thread_events(process_events: Sequence[TraceEvent], start_event: TraceEvent) -> List[TraceEvent]:
        """Subset of the process events on the tab's main thread."""
        return [e for e in process_events if e.tid == start_event.tid]

    @staticmethod
    def trace_end(trace_events: Sequence[TraceEvent]) -> Timestamp:
        """Latest end (ts + dur) over every event in the trace."""
        return max(e.end_ts for e in trace_events)
