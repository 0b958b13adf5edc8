"""Bucket round-trip verification.

Upload a probe file, delete it locally, download it back and delete the
download. Every step runs even when an earlier one failed; only a failure to
build the storage client aborts the run. Failures are logged and collected in
the returned report, never raised.

The uploaded object is left in the bucket.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from bucket_tester.core import get_logger, get_tracer
from bucket_tester.core.exceptions import (
    BucketTesterError,
    ClientConstructionError,
    LocalIOError,
    RemoteCallError,
)
from bucket_tester.objectstorage.clients import (
    DEFAULT_REGION,
    S3ClientConfig,
    S3ClientManager,
)

from .probe import ProbeFile, create_probe_file, new_probe_file

logger = get_logger(__name__)
tracer = get_tracer(__name__)


class Step(str, Enum):
    """Steps of the round trip, in execution order."""

    client = "client"
    create_probe = "create_probe"
    upload = "upload"
    delete_probe = "delete_probe"
    download = "download"
    delete_download = "delete_download"


class ErrorKind(str, Enum):
    """Classification of a failed step."""

    client_construction = "client_construction"
    local_io = "local_io"
    remote_call = "remote_call"


_ERROR_KINDS = {
    ClientConstructionError: ErrorKind.client_construction,
    LocalIOError: ErrorKind.local_io,
    RemoteCallError: ErrorKind.remote_call,
}


class RoundTripConfig(BaseModel):
    """Inputs of one round trip, constructed once and passed to the verifier."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    bucket: str = Field(..., min_length=1, description="Target bucket name")
    access_key_id: str = Field(..., description="AWS access key ID")
    secret_access_key: str = Field(
        ..., description="AWS secret access key", repr=False
    )
    region_name: str = Field(DEFAULT_REGION, description="AWS region name")


@dataclass(frozen=True)
class StepResult:
    """Outcome of a single round-trip step."""

    step: Step
    succeeded: bool
    error_kind: Optional[ErrorKind] = None
    message: Optional[str] = None


@dataclass
class RoundTripReport:
    """Outcome of a whole round trip."""

    bucket: str
    key: Optional[str] = None
    steps: list[StepResult] = field(default_factory=list)
    aborted: bool = False

    @property
    def failed_steps(self) -> list[Step]:
        return [result.step for result in self.steps if not result.succeeded]

    @property
    def succeeded(self) -> bool:
        return not self.aborted and not self.failed_steps


class BucketRoundTripVerifier:
    """Runs the upload/download round trip against one bucket."""

    def __init__(self, config: RoundTripConfig, working_dir: Optional[Path] = None):
        """Initialize the verifier.

        Args:
            config: Bucket, credentials and region for the run
            working_dir: Directory for the probe and downloaded files,
                defaults to the current working directory
        """
        self.config = config
        self.working_dir = working_dir
        logger.info("Round-trip verifier initialized", bucket=config.bucket)

    def run(self) -> RoundTripReport:
        """Run every step of the round trip.

        Returns:
            RoundTripReport listing the result of each attempted step
        """
        report = RoundTripReport(bucket=self.config.bucket)

        with tracer.start_as_current_span("bucket_round_trip") as span:
            span.set_attribute("bucket_tester.bucket", self.config.bucket)

            try:
                client = self._build_client()
            except ClientConstructionError as e:
                logger.error(
                    "Storage client could not be created, round trip aborted",
                    bucket=self.config.bucket,
                    error=str(e),
                )
                report.aborted = True
                report.steps.append(
                    StepResult(
                        step=Step.client,
                        succeeded=False,
                        error_kind=ErrorKind.client_construction,
                        message=str(e),
                    )
                )
                span.set_attribute("bucket_tester.succeeded", False)
                return report

            report.steps.append(StepResult(step=Step.client, succeeded=True))

            probe = new_probe_file(self.working_dir)
            report.key = probe.name
            span.set_attribute("bucket_tester.key", probe.name)

            steps: list[tuple[Step, Callable[[], None]]] = [
                (Step.create_probe, lambda: create_probe_file(probe)),
                (Step.upload, lambda: self._upload(client, probe)),
                (Step.delete_probe, lambda: _delete_local(probe.path)),
                (Step.download, lambda: self._download(client, probe)),
                (Step.delete_download, lambda: _delete_local(probe.download_path)),
            ]
            for step, action in steps:
                report.steps.append(self._attempt(step, action))

            span.set_attribute("bucket_tester.succeeded", report.succeeded)

        if report.succeeded:
            logger.info(
                "Bucket round trip succeeded", bucket=report.bucket, key=report.key
            )
        else:
            logger.warning(
                "Bucket round trip finished with failures",
                bucket=report.bucket,
                key=report.key,
                failed_steps=[step.value for step in report.failed_steps],
            )
        return report

    def _build_client(self):
        """Build the S3 client, wrapping invalid credentials."""
        try:
            client_config = S3ClientConfig(
                access_key_id=self.config.access_key_id,
                secret_access_key=self.config.secret_access_key,
                region_name=self.config.region_name,
            )
        except PydanticValidationError as e:
            raise ClientConstructionError(f"Invalid credentials: {e}") from e

        return S3ClientManager(client_config).client

    def _attempt(self, step: Step, action: Callable[[], None]) -> StepResult:
        """Run one step, converting its failure into a result."""
        with tracer.start_as_current_span(f"round_trip.{step.value}") as span:
            try:
                action()
            except BucketTesterError as e:
                span.record_exception(e)
                span.set_attribute("bucket_tester.succeeded", False)
                logger.error(
                    "Round-trip step failed",
                    bucket=self.config.bucket,
                    step=step.value,
                    error=str(e),
                )
                return StepResult(
                    step=step,
                    succeeded=False,
                    error_kind=_ERROR_KINDS.get(type(e)),
                    message=str(e),
                )

            span.set_attribute("bucket_tester.succeeded", True)
            return StepResult(step=step, succeeded=True)

    def _upload(self, client, probe: ProbeFile) -> None:
        """Put the probe file under a key equal to its base name."""
        try:
            body = probe.path.read_bytes()
        except OSError as e:
            raise LocalIOError(f"The probe file could not be read: {e}") from e

        try:
            client.put_object(Bucket=self.config.bucket, Key=probe.name, Body=body)
        except (ClientError, BotoCoreError) as e:
            raise RemoteCallError(
                f"The probe file could not be uploaded to the bucket: {e}"
            ) from e

        logger.info(
            "Probe file uploaded",
            bucket=self.config.bucket,
            key=probe.name,
            size=len(body),
        )

    def _download(self, client, probe: ProbeFile) -> None:
        """Get the probe object back and write it next to the original."""
        try:
            response = client.get_object(Bucket=self.config.bucket, Key=probe.name)
            body = response["Body"]
            try:
                payload = body.read()
            finally:
                body.close()
        except (ClientError, BotoCoreError) as e:
            raise RemoteCallError(
                f"The probe file could not be downloaded from the bucket: {e}"
            ) from e

        try:
            with open(probe.download_path, "wb") as f:
                f.write(payload)
        except OSError as e:
            raise LocalIOError(
                f"The downloaded file could not be written: {e}"
            ) from e

        logger.info(
            "Probe file downloaded",
            bucket=self.config.bucket,
            key=probe.name,
            path=str(probe.download_path),
            size=len(payload),
        )


def _delete_local(path: Path) -> None:
    """Remove a local file created by the round trip."""
    try:
        path.unlink()
    except OSError as e:
        raise LocalIOError(f"The file could not be deleted: {e}") from e

    logger.info("Local file deleted", path=str(path))


def run_round_trip(
    bucket: str,
    access_key_id: str,
    secret_access_key: str,
    working_dir: Optional[Path] = None,
) -> RoundTripReport:
    """Convenience function to run a bucket round trip.

    Args:
        bucket: Target bucket name
        access_key_id: AWS access key ID
        secret_access_key: AWS secret access key
        working_dir: Directory for the probe and downloaded files

    Returns:
        RoundTripReport; invalid inputs yield an aborted report
    """
    try:
        config = RoundTripConfig(
            bucket=bucket,
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
        )
    except PydanticValidationError as e:
        logger.error("Round trip aborted, invalid configuration", error=str(e))
        return RoundTripReport(
            bucket=bucket,
            aborted=True,
            steps=[
                StepResult(
                    step=Step.client,
                    succeeded=False,
                    error_kind=ErrorKind.client_construction,
                    message=str(e),
                )
            ],
        )

    verifier = BucketRoundTripVerifier(config, working_dir=working_dir)
    return verifier.run()
