"""Utility functions and helpers for rhoas-kafka."""

from rhoas_kafka.utils.errors import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    ContextError,
    NotFoundError,
    RHOASError,
    ValidationError,
)
from rhoas_kafka.utils.formatting import (
    VALID_OUTPUT_FORMATS,
    dump_formatted,
    dump_table,
    emoji,
    format_table,
)

__all__ = [
    # Errors
    "RHOASError",
    "APIError",
    "AuthenticationError",
    "ConfigurationError",
    "ContextError",
    "NotFoundError",
    "ValidationError",
    # Formatting
    "VALID_OUTPUT_FORMATS",
    "dump_formatted",
    "dump_table",
    "emoji",
    "format_table",
]
