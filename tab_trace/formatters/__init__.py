"""Formatting utilities for human-readable output."""

from .time_formatter import format_time, format_timing

__all__ = ["format_time", "format_timing"]
