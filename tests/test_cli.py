"""Tests for the bucket-tester command line."""

from unittest.mock import patch

from botocore.exceptions import ClientError
from typer.testing import CliRunner

from bucket_tester.cli import USAGE, app

runner = CliRunner()


class TestUsage:
    """Test argument count handling."""

    @patch("bucket_tester.cli.run_round_trip")
    def test_no_arguments(self, mock_run):
        """Test the usage line is printed without arguments."""
        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert result.stdout.strip() == USAGE
        mock_run.assert_not_called()

    @patch("bucket_tester.objectstorage.clients.s3_client.boto3.client")
    def test_two_arguments(self, mock_client):
        """Test two arguments print usage and make no storage call."""
        result = runner.invoke(app, ["bucket", "key"])

        assert result.exit_code == 0
        assert USAGE in result.stdout
        mock_client.assert_not_called()
        mock_client.return_value.put_object.assert_not_called()
        mock_client.return_value.get_object.assert_not_called()


class TestRoundTripCommand:
    """Test the round trip invocation."""

    @patch("bucket_tester.cli.run_round_trip")
    def test_three_arguments(self, mock_run):
        """Test the three positional arguments reach the round trip."""
        result = runner.invoke(app, ["bucket", "key", "secret"])

        assert result.exit_code == 0
        assert USAGE not in result.stdout
        mock_run.assert_called_once_with("bucket", "key", "secret")

    @patch("bucket_tester.cli.run_round_trip")
    def test_extra_arguments_ignored(self, mock_run):
        """Test arguments beyond the third are ignored."""
        result = runner.invoke(app, ["bucket", "key", "secret", "extra"])

        assert result.exit_code == 0
        mock_run.assert_called_once_with("bucket", "key", "secret")

    @patch("bucket_tester.objectstorage.clients.s3_client.boto3.client")
    def test_failures_exit_zero(self, mock_client, workdir):
        """Test a round trip with failing storage calls still exits with 0."""
        error = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "Access Denied"}}, "Call"
        )
        mock_client.return_value.put_object.side_effect = error
        mock_client.return_value.get_object.side_effect = error

        result = runner.invoke(app, ["bucket", "key", "secret"])

        assert result.exit_code == 0
        mock_client.return_value.put_object.assert_called_once()
        mock_client.return_value.get_object.assert_called_once()
        assert list(workdir.iterdir()) == []

    def test_client_construction_failure_exits_zero(self, workdir):
        """Test an aborted round trip exits with status 0."""
        result = runner.invoke(app, ["bucket", "", "secret"])

        assert result.exit_code == 0
        assert list(workdir.iterdir()) == []

    @patch("bucket_tester.objectstorage.clients.s3_client.boto3.client")
    def test_deleted_working_directory_exits_zero(
        self, mock_client, tmp_path, monkeypatch
    ):
        """Test a working directory removed before the run still exits with 0."""
        gone = tmp_path / "gone"
        gone.mkdir()
        monkeypatch.chdir(gone)
        gone.rmdir()
        mock_client.return_value.get_object.side_effect = ClientError(
            {"Error": {"Code": "NoSuchKey", "Message": "Not Found"}}, "GetObject"
        )

        result = runner.invoke(app, ["bucket", "key", "secret"])

        assert result.exit_code == 0
        assert result.exception is None
        mock_client.return_value.put_object.assert_not_called()
