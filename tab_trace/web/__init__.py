"""Web output helpers."""

from .result_builder import prepare_results, serialize_event

__all__ = ["prepare_results", "serialize_event"]
