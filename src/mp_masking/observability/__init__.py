"""Observability – logging integration."""
from mp_masking.observability.logging import (
    JsonLoggerFactory,
    MaskingProcessor,
    PiiLogFilter,
    get_logger,
)

__all__ = ["JsonLoggerFactory", "MaskingProcessor", "PiiLogFilter", "get_logger"]
