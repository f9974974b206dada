"""
Errors raised while extracting a tab's lifecycle from a trace.
"""

from typing import Optional


class TraceOfTabError(Exception):
    """Base error: the trace cannot be analyzed."""

    code = 'TRACE_OF_TAB_ERROR'
    default_message = 'Trace could not be analyzed'

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class NoNavigationStartError(TraceOfTabError):
    """No plausible navigationStart marker in the tracked frame."""

    code = 'NO_NAVSTART'
    default_message = 'No navigationStart event found in the tracked frame'


class NoFirstContentfulPaintError(TraceOfTabError):
    """The tracked frame never reached first contentful paint."""

    code = 'NO_FCP'
    default_message = 'No firstContentfulPaint event found after navigationStart'


class NoTracingStartedError(TraceOfTabError):
    """The tracked frame could not be identified."""

    code = 'NO_TRACING_STARTED'
    default_message = 'No TracingStartedInPage or usable TracingStartedInBrowser event found'


class TraceFormatError(TraceOfTabError):
    """Input is not a readable Chrome trace."""

    code = 'INVALID_TRACE'
    default_message = 'Input is not a valid trace JSON document'
