"""
Type definitions for tab trace analysis.
"""

from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Tuple, Union

Timestamp = Union[int, float]


def frozen_mapping(data: Optional[Mapping[str, Any]] = None) -> Mapping[str, Any]:
    return MappingProxyType(dict(data or {}))


@dataclass(frozen=True)
class EventArgs:
    """Generic event payload: the owning frame plus the raw args for consumers."""
    frame_id: Optional[str] = None
    data: Mapping[str, Any] = field(default_factory=frozen_mapping, compare=False, repr=False)


@dataclass(frozen=True)
class NavigationArgs(EventArgs):
    """Payload of a navigationStart marker."""
    document_loader_url: Optional[str] = None


@dataclass(frozen=True)
class MetadataArgs(EventArgs):
    """Payload of a __metadata event such as thread_name or process_name."""
    name: Optional[str] = None


@dataclass(frozen=True)
class FrameInfo:
    """One frame listed by TracingStartedInBrowser."""
    frame: Optional[str]
    process_id: Optional[int]
    parent: Optional[str] = None


@dataclass(frozen=True)
class TracingStartedArgs(EventArgs):
    """Payload of TracingStartedInPage / TracingStartedInBrowser."""
    page: Optional[str] = None
    frames: Tuple[FrameInfo, ...] = ()


@dataclass(frozen=True)
class TraceEvent:
    """One recorded occurrence in a Chrome trace."""
    name: str
    categories: frozenset
    pid: int
    tid: int
    ts: Timestamp
    dur: Optional[Timestamp] = None
    ph: str = ''
    args: EventArgs = field(default_factory=EventArgs)

    @property
    def end_ts(self) -> Timestamp:
        return self.ts + (self.dur or 0)


@dataclass
class Trace:
    """A captured trace; event order is capture order, not chronological."""
    trace_events: List[TraceEvent]


class TracingStart(NamedTuple):
    """Result of the frame-resolution strategy."""
    event: TraceEvent
    frame_id: str


# Wire names for each TraceTimes field
TRACE_TIMES_KEYS: Dict[str, str] = {
    'navigation_start': 'navigationStart',
    'first_paint': 'firstPaint',
    'first_contentful_paint': 'firstContentfulPaint',
    'first_meaningful_paint': 'firstMeaningfulPaint',
    'trace_end': 'traceEnd',
    'load': 'load',
    'dom_content_loaded': 'domContentLoaded',
}


@dataclass(frozen=True)
class TraceTimes:
    """Marker values keyed by lifecycle marker; None where the marker was not found."""
    navigation_start: Optional[float] = None
    first_paint: Optional[float] = None
    first_contentful_paint: Optional[float] = None
    first_meaningful_paint: Optional[float] = None
    trace_end: Optional[float] = None
    load: Optional[float] = None
    dom_content_loaded: Optional[float] = None

    def to_dict(self) -> Dict[str, Optional[float]]:
        """Convert to the camelCase mapping used in JSON output."""
        return {TRACE_TIMES_KEYS[f.name]: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class LifecycleMarkers:
    """Marker events found for the tracked frame."""
    navigation_start: TraceEvent
    first_contentful_paint: TraceEvent
    first_paint: Optional[TraceEvent] = None
    first_meaningful_paint: Optional[TraceEvent] = None
    load: Optional[TraceEvent] = None
    dom_content_loaded: Optional[TraceEvent] = None
    fmp_fell_back: bool = False


@dataclass(frozen=True)
class TraceOfTab:
    """Lifecycle markers and scoped event sets of the tracked tab."""
    timings: TraceTimes
    timestamps: TraceTimes
    process_events: Tuple[TraceEvent, ...]
    main_thread_events: Tuple[TraceEvent, ...]
    started_in_page_evt: TraceEvent
    navigation_start_evt: TraceEvent
    first_contentful_paint_evt: TraceEvent
    first_paint_evt: Optional[TraceEvent] = None
    first_meaningful_paint_evt: Optional[TraceEvent] = None
    load_evt: Optional[TraceEvent] = None
    dom_content_loaded_evt: Optional[TraceEvent] = None
    fmp_fell_back: bool = False


class TraceConfig:
    """Configuration for trace-of-tab extraction."""

    def __init__(
        self,
        key_categories: Tuple[str, ...] = ('blink.user_timing', 'loading', 'devtools.timeline'),
        metadata_category: str = '__metadata',
        acceptable_navigation_url: str = r'^(chrome|https?):'
    ):
        """
        Initialize trace-of-tab configuration.

        Args:
            key_categories: Categories that mark an event as a lifecycle marker candidate.
                           An event is kept if any of its categories is listed here.

            metadata_category: Category of trace metadata events (thread/process names).
                              Events whose only category is this one are also kept.

            acceptable_navigation_url: Regex a navigationStart document URL must match
                                      to count. Events without a URL are always accepted.
                                      Default: http(s) and chrome internal pages.
        """
        self.key_categories = frozenset(key_categories)
        self.metadata_category = metadata_category
        self.acceptable_navigation_url = acceptable_navigation_url
