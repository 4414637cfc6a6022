"""Utility functions for prdigest."""

from prdigest.utils.retry import RetryHandler

__all__ = [
    "RetryHandler",
]
