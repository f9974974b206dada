"""
Conversion of raw Chrome trace event dictionaries into TraceEvent records.
"""

from typing import Any, Dict, Mapping

from ..core.types import (
    EventArgs,
    FrameInfo,
    MetadataArgs,
    NavigationArgs,
    TraceEvent,
    TracingStartedArgs,
    frozen_mapping,
)

TRACING_STARTED_EVENTS = ('TracingStartedInPage', 'TracingStartedInBrowser')


class EventParser:
    """Parses raw trace events, tagging args by event kind."""

    @staticmethod
    def parse_categories(cat: Any) -> frozenset:
        """
        Split Chrome's comma-separated category string.

        Args:
            cat: Raw 'cat' value, e.g. 'devtools.timeline,rail'

        Returns:
            Frozen set of category names (empty for missing categories)
        """
        if not cat:
            return frozenset()
        if isinstance(cat, str):
            return frozenset(part.strip() for part in cat.split(',') if part.strip())
        return frozenset(cat)

    @staticmethod
    def parse_args(name: str, categories: frozenset, raw_args: Mapping) -> EventArgs:
        """
        Build the tagged args payload for an event.

        Args:
            name: Event name
            categories: Parsed categories
            raw_args: Raw 'args' dictionary

        Returns:
            NavigationArgs, MetadataArgs, TracingStartedArgs or plain EventArgs
        """
        raw_args = raw_args if isinstance(raw_args, Mapping) else {}
        data = raw_args.get('data')
        data = data if isinstance(data, Mapping) else {}
        frame_id = raw_args.get('frame')
        frozen = frozen_mapping(raw_args)

        if name == 'navigationStart':
            return NavigationArgs(
                frame_id=frame_id,
                data=frozen,
                document_loader_url=data.get('documentLoaderURL')
            )

        if name in TRACING_STARTED_EVENTS:
            frames = tuple(
                FrameInfo(
                    frame=frame.get('frame'),
                    process_id=frame.get('processId'),
                    parent=frame.get('parent')
                )
                for frame in data.get('frames', []) or []
                if isinstance(frame, Mapping)
            )
            return TracingStartedArgs(
                frame_id=frame_id,
                data=frozen,
                page=data.get('page'),
                frames=frames
            )

        if '__metadata' in categories:
            return MetadataArgs(frame_id=frame_id, data=frozen, name=raw_args.get('name'))

        return EventArgs(frame_id=frame_id, data=frozen)

    def parse_event(self, raw: Dict[str, Any]) -> TraceEvent:
        """
        Parse one raw trace event.

        Args:
            raw: Event dictionary as found in 'traceEvents'

        Returns:
            Immutable TraceEvent
        """
        name = raw.get('name', '')
        categories = self.parse_categories(raw.get('cat'))
        return TraceEvent(
            name=name,
            categories=categories,
            pid=raw.get('pid', 0),
            tid=raw.get('tid', 0),
            ts=raw.get('ts', 0),
            dur=raw.get('dur'),
            ph=raw.get('ph', ''),
            args=self.parse_args(name, categories, raw.get('args') or {})
        )
