"""Core utilities and shared components for bucket-tester."""

from .config import settings
from .exceptions import BucketTesterError
from .observability import get_logger, get_tracer

__all__ = [
    "settings",
    "BucketTesterError",
    "get_logger",
    "get_tracer",
]
