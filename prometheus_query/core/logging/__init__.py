from .logger import get_logger, redact_credentials, setup_logging

__all__ = [
    "get_logger",
    "redact_credentials",
    "setup_logging",
]
