"""Observability – structured logging helpers with masking."""
from mp_masking.observability.logging.factory import JsonLoggerFactory
from mp_masking.observability.logging.filters import PiiLogFilter
from mp_masking.observability.logging.processors import MaskingProcessor, get_logger

__all__ = [
    "JsonLoggerFactory",
    "MaskingProcessor",
    "PiiLogFilter",
    "get_logger",
]
