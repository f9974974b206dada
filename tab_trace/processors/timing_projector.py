"""
Projection of marker timestamps onto milliseconds since navigation start.
"""

from typing import Optional, Tuple

from ..core.types import LifecycleMarkers, Timestamp, TraceEvent, TraceTimes


class TimingProjector:
    """Builds the raw timestamp and relative timing views of the markers."""

    @staticmethod
    def get_timestamp(event: Optional[TraceEvent]) -> Optional[Timestamp]:
        return event.ts if event is not None else None

    @staticmethod
    def to_timing(ts: Optional[Timestamp], navigation_start_ts: Timestamp) -> Optional[float]:
        """
        Convert an absolute timestamp to milliseconds since navigation start.

        Args:
            ts: Monotonic timestamp in microseconds, or None
            navigation_start_ts: Navigation start timestamp in microseconds

        Returns:
            Milliseconds since navigation start, or None when ts is None
        """
        if ts is None:
            return None
        return (ts - navigation_start_ts) / 1000

    def project(self, markers: LifecycleMarkers, trace_end: Timestamp) -> Tuple[TraceTimes, TraceTimes]:
        """
        Project markers into (timestamps, timings).

        Args:
            markers: Lifecycle markers of the tracked frame
            trace_end: End of the whole capture in microseconds

        Returns:
            Tuple of (timestamps in microseconds, timings in milliseconds)
        """
        timestamps = TraceTimes(
            navigation_start=markers.navigation_start.ts,
            first_paint=self.get_timestamp(markers.first_paint),
            first_contentful_paint=markers.first_contentful_paint.ts,
            first_meaningful_paint=self.get_timestamp(markers.first_meaningful_paint),
            trace_end=trace_end,
            load=self.get_timestamp(markers.load),
            dom_content_loaded=self.get_timestamp(markers.dom_content_loaded),
        )

        navigation_start_ts = timestamps.navigation_start
        timings = TraceTimes(
            navigation_start=0,
            first_paint=self.to_timing(timestamps.first_paint, navigation_start_ts),
            first_contentful_paint=self.to_timing(timestamps.first_contentful_paint, navigation_start_ts),
            first_meaningful_paint=self.to_timing(timestamps.first_meaningful_paint, navigation_start_ts),
            trace_end=self.to_timing(timestamps.trace_end, navigation_start_ts),
            load=self.to_timing(timestamps.load, navigation_start_ts),
            dom_content_loaded=self.to_timing(timestamps.dom_content_loaded, navigation_start_ts),
        )

        return timestamps, timings
