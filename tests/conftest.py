"""Test configuration and fixtures for bucket-tester."""

import io
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test inside an empty temporary working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def in_memory_client():
    """Create a mock S3 client backed by a dict of stored objects."""
    objects = {}
    client = MagicMock()

    def put_object(Bucket, Key, Body):
        objects[(Bucket, Key)] = Body
        return {"ETag": '"mock"'}

    def get_object(Bucket, Key):
        if (Bucket, Key) not in objects:
            raise ClientError(
                {"Error": {"Code": "NoSuchKey", "Message": "Not Found"}}, "GetObject"
            )
        return {"Body": io.BytesIO(objects[(Bucket, Key)])}

    client.put_object.side_effect = put_object
    client.get_object.side_effect = get_object
    client.objects = objects
    return client
