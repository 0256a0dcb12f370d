"""Tests for bucket_toolkit/common/credential_utils.py"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from bucket_toolkit.common.credential_utils import (
    check_aws_credentials,
    setup_aws_credentials,
)
from bucket_toolkit.common.errors import MissingCredentialsError
from tests.assertions import assert_equal


def test_setup_aws_credentials_success(monkeypatch):
    """Test setup_aws_credentials with valid credentials."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "test_key")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "test_secret")

    credentials = setup_aws_credentials()

    assert_equal(credentials.access_key_id, "test_key")
    assert_equal(credentials.secret_access_key, "test_secret")


@patch("bucket_toolkit.common.aws_client_factory.load_dotenv")
def test_setup_aws_credentials_missing(mock_load_dotenv, monkeypatch):
    """Test setup_aws_credentials with missing credentials."""
    monkeypatch.delenv("AWS_ACCESS_KEY_ID")

    with pytest.raises(MissingCredentialsError, match="AWS credentials not found"):
        setup_aws_credentials("/tmp/creds.env")

    mock_load_dotenv.assert_called_once_with("/tmp/creds.env")


def test_check_aws_credentials_success():
    """Test check_aws_credentials with valid credentials."""
    assert_equal(check_aws_credentials(), True)


@patch("bucket_toolkit.common.aws_client_factory.load_dotenv")
def test_check_aws_credentials_missing_prints_help(mock_load_dotenv, monkeypatch, capsys):
    """Missing credentials print where they were looked for and how to provide them."""
    monkeypatch.delenv("AWS_SECRET_ACCESS_KEY")

    result = check_aws_credentials("/tmp/creds.env")

    assert_equal(result, False)
    captured = capsys.readouterr()
    assert "/tmp/creds.env" in captured.out
    assert "AWS_SECRET_ACCESS_KEY=your-secret-key" in captured.out
