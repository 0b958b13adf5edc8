"""Bucket round-trip verification."""

from .probe import ProbeFile, create_probe_file, new_probe_file, probe_file_name
from .round_trip import (
    BucketRoundTripVerifier,
    ErrorKind,
    RoundTripConfig,
    RoundTripReport,
    Step,
    StepResult,
    run_round_trip,
)

__all__ = [
    "BucketRoundTripVerifier",
    "ErrorKind",
    "ProbeFile",
    "RoundTripConfig",
    "RoundTripReport",
    "Step",
    "StepResult",
    "create_probe_file",
    "new_probe_file",
    "probe_file_name",
    "run_round_trip",
]
