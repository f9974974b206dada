"""
Fire-and-forget reporting of trace anomalies.
"""

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

# A sink receives (message, level), e.g. ('No firstMeaningfulPaint found, using fallback', 'warning')
TelemetrySink = Callable[[str, str], None]


def log_sink(message: str, level: str = 'warning') -> None:
    """Default sink: write the report to the tab_trace.telemetry logger."""
    level_no = getattr(logging, level.upper(), logging.WARNING)
    if not isinstance(level_no, int):
        level_no = logging.WARNING
    logger.log(level_no, message)


def report(sink: Optional[TelemetrySink], message: str, level: str = 'warning') -> None:
    """
    Send a report to the sink without letting it interfere with the caller.

    Args:
        sink: Telemetry sink, or None to drop the report
        message: Human-readable description of the anomaly
        level: Severity label ('warning', 'info', ...)
    """
    if sink is None:
        return
    try:
        sink(message, level)
    except Exception:
        logger.debug('Telemetry sink failed to report %r', message, exc_info=True)
