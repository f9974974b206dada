"""Extraction utilities for raw trace events."""

from .event_parser import EventParser
from .tracing_started import find_tracing_started

__all__ = ["EventParser", "find_tracing_started"]
