"""
JSON trace file processing using streaming parser.
"""

import logging
from typing import BinaryIO, List, Optional

import ijson

from ..core.errors import TraceFormatError
from ..core.types import Trace, TraceEvent
from ..extractors.event_parser import EventParser

logger = logging.getLogger(__name__)

PROGRESS_INTERVAL = 100000
DETECT_CHUNK_SIZE = 64


class TraceFileProcessor:
    """Loads Chrome trace JSON files using streaming parser."""

    def __init__(self, parser: Optional[EventParser] = None):
        self.parser = parser or EventParser()

    @staticmethod
    def _detect_prefix(stream: BinaryIO) -> str:
        """
        Pick the ijson prefix for the trace layout.

        Chrome writes either {"traceEvents": [...], ...} or a bare [...] array.
        """
        head = b''
        first = True
        while not head:
            chunk = stream.read(DETECT_CHUNK_SIZE)
            if not chunk:
                break
            if isinstance(chunk, str):
                chunk = chunk.encode('utf-8')
            if first:
                chunk = chunk.lstrip(b'\xef\xbb\xbf')
                first = False
            head = chunk.lstrip(b' \t\r\n')
        stream.seek(0)

        if head.startswith(b'['):
            return 'item'
        if head.startswith(b'{'):
            return 'traceEvents.item'
        raise TraceFormatError('Trace must be a JSON array or an object with "traceEvents"')

    def process_stream(self, stream: BinaryIO) -> Trace:
        """
        Read trace events from a binary stream.

        Args:
            stream: Seekable file-like object with trace JSON

        Returns:
            Trace with events in capture order
        """
        prefix = self._detect_prefix(stream)
        events: List[TraceEvent] = []

        try:
            for raw in ijson.items(stream, prefix, use_float=True):
                if not isinstance(raw, dict):
                    continue
                events.append(self.parser.parse_event(raw))
                if len(events) % PROGRESS_INTERVAL == 0:
                    logger.info('  Read %d trace events...', len(events))
        except ijson.JSONError as e:
            raise TraceFormatError(f'Malformed trace JSON: {e}') from e

        logger.info('Completed reading trace: %d events found.', len(events))
        return Trace(trace_events=events)

    def process_file(self, file_path: str) -> Trace:
        """
        Load a trace JSON file.

        Args:
            file_path: Path to the trace JSON file

        Returns:
            Trace with events in capture order
        """
        logger.info('Processing %s...', file_path)
        with open(file_path, 'rb') as f:
            return self.process_stream(f)
