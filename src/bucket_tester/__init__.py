"""Verify read and write access to an S3 bucket.

The round trip creates a small probe file in the working directory, uploads
it, deletes it, downloads it back as ``download_<name>`` and deletes the
download. Each step is attempted regardless of earlier failures and every
failure is logged to stderr.

Usage:
    >>> from bucket_tester import run_round_trip
    >>> report = run_round_trip("my-bucket", "AKIA...", "secret")
    >>> report.succeeded
"""

__version__ = "0.1.0"

from .objectstorage import (
    BucketRoundTripVerifier,
    RoundTripConfig,
    RoundTripReport,
    S3ClientConfig,
    run_round_trip,
)

__all__ = [
    "BucketRoundTripVerifier",
    "RoundTripConfig",
    "RoundTripReport",
    "S3ClientConfig",
    "run_round_trip",
]
