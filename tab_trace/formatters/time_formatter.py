"""
Time formatting utilities for human-readable output.
"""

from typing import Optional


def format_time(ms: float) -> str:
    """
    Format time in milliseconds to a human-readable string.

    Args:
        ms: Time in milliseconds

    Returns:
        Formatted time string (e.g., "123.45 ms", "2.34 s")
    """
    if abs(ms) < 1000:
        return f"{ms:.2f} ms"
    return f"{ms / 1000:.2f} s"


def format_timing(ms: Optional[float]) -> str:
    """Format a marker timing, showing markers that were never found as 'n/a'."""
    if ms is None:
        return "n/a"
    return format_time(ms)
