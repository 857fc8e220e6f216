"""
Cellsynt Logging Module

Structured logging setup for applications using the client.
"""

from .structured import setup_logging, get_logger

__all__ = [
    "setup_logging",
    "get_logger",
]
