"""Object storage operations for S3-compatible services."""

from .clients import S3ClientConfig, S3ClientManager
from .verification import (
    BucketRoundTripVerifier,
    RoundTripConfig,
    RoundTripReport,
    run_round_trip,
)

__all__ = [
    "BucketRoundTripVerifier",
    "RoundTripConfig",
    "RoundTripReport",
    "S3ClientConfig",
    "S3ClientManager",
    "run_round_trip",
]
