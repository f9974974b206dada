"""
Tab Trace Analyzer - Chrome Trace Page Lifecycle Extraction
"""

__version__ = "1.0.0"

from .core.trace_of_tab import TraceOfTabComputer, compute_trace_of_tab
from .core.types import Trace, TraceConfig, TraceEvent, TraceOfTab, TraceTimes, TracingStart
from .core.errors import (
    TraceOfTabError,
    NoNavigationStartError,
    NoFirstContentfulPaintError,
    NoTracingStartedError,
    TraceFormatError,
)

__all__ = [
    "TraceOfTabComputer",
    "compute_trace_of_tab",
    "Trace",
    "TraceConfig",
    "TraceEvent",
    "TraceOfTab",
    "TraceTimes",
    "TracingStart",
    "TraceOfTabError",
    "NoNavigationStartError",
    "NoFirstContentfulPaintError",
    "NoTracingStartedError",
    "TraceFormatError",
]
