"""
Core Module

Foundational components: configuration, logging and exceptions.
"""

from .exceptions import (
    ConfigurationError,
    DecodeError,
    PromBaseError,
    QueryFailedError,
    TransportError,
)
from .logging import get_logger, setup_logging

__all__ = [
    "ConfigurationError",
    "DecodeError",
    "PromBaseError",
    "QueryFailedError",
    "TransportError",
    "get_logger",
    "setup_logging",
]
