"""Shared pytest fixtures for test files."""

from __future__ import annotations

import pytest
from botocore.exceptions import ClientError

from bucket_toolkit.lifecycle import BucketLifecycleManager
from tests.s3_test_utils import make_s3_client

_ENV_VARS_TO_CLEAR = (
    "AWS_SESSION_TOKEN",
    "AWS_REGION",
    "AWS_DEFAULT_REGION",
    "BUCKET_NAME",
    "BUCKET_NAMES",
)


class _StubBotoClient:
    """Minimal stub for boto3 clients used in tests."""

    def __init__(self, service_name: str, **kwargs):
        self.service_name = service_name
        self.region_name = kwargs.get("region_name")
        self.exceptions = ClientError

    def __getattr__(self, name: str):
        def _method(*args, **kwargs):
            raise AssertionError(f"Unexpected real AWS call: {self.service_name}.{name}")

        return _method


@pytest.fixture(autouse=True)
def stub_boto3_client(monkeypatch):
    """Replace boto3.client with a stub so tests don't call real AWS."""

    def fake_client(service_name, **kwargs):
        return _StubBotoClient(service_name, **kwargs)

    monkeypatch.setattr("boto3.client", fake_client)


@pytest.fixture(autouse=True)
def stub_credentials(monkeypatch):
    """Provide fake AWS credentials and clear region/bucket variables from the host."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "stub-key")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "stub-secret")
    for name in _ENV_VARS_TO_CLEAR:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def s3_client():
    """A mocked S3 client with empty paginators."""
    return make_s3_client()


@pytest.fixture
def manager(s3_client):
    """BucketLifecycleManager wired to the mocked S3 client for every region."""
    return BucketLifecycleManager(client_factory=lambda region: s3_client)
