"""Processors for trace event ordering, marker resolution and timing."""

from .stable_sort import filtered_stable_sort
from .navigation_resolver import NavigationResolver
from .timing_projector import TimingProjector
from .file_processor import TraceFileProcessor

__all__ = [
    "filtered_stable_sort",
    "NavigationResolver",
    "TimingProjector",
    "TraceFileProcessor",
]
