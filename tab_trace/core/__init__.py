"""Core components for trace-of-tab extraction."""

from .types import Trace, TraceConfig, TraceEvent, TraceOfTab, TraceTimes, TracingStart
from .errors import TraceOfTabError, NoNavigationStartError, NoFirstContentfulPaintError
from .trace_of_tab import TraceOfTabComputer, compute_trace_of_tab

__all__ = [
    "Trace",
    "TraceConfig",
    "TraceEvent",
    "TraceOfTab",
    "TraceTimes",
    "TracingStart",
    "TraceOfTabError",
    "NoNavigationStartError",
    "NoFirstContentfulPaintError",
    "TraceOfTabComputer",
    "compute_trace_of_tab",
]
