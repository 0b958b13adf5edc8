"""Command-line interface for bucket-tester.

    bucket-tester <bucket name> <access key id> <secret access key>

Runs the bucket round trip once. With fewer than three arguments the usage
line is printed and nothing else happens. The exit status is 0 in every
case; failures are reported only through the log lines on stderr.
"""

from typing import Annotated, Optional

import typer

from .objectstorage.verification import run_round_trip

USAGE = "Usage: bucket-tester <bucket name> <access key id> <secret access key>"

app = typer.Typer(
    name="bucket-tester",
    help="Verify read and write access to an S3 bucket.",
    add_completion=False,
)


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    add_help_option=False,
)
def main(
    bucket: Annotated[
        Optional[str], typer.Argument(help="Name of the bucket to verify")
    ] = None,
    access_key_id: Annotated[
        Optional[str], typer.Argument(help="AWS access key ID")
    ] = None,
    secret_access_key: Annotated[
        Optional[str], typer.Argument(help="AWS secret access key")
    ] = None,
) -> None:
    """Upload, download and clean up a probe file in BUCKET."""
    if bucket is None or access_key_id is None or secret_access_key is None:
        typer.echo(USAGE)
        return

    run_round_trip(bucket, access_key_id, secret_access_key)


if __name__ == "__main__":
    app()
