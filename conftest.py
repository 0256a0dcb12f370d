"""Pytest configuration and shared fixtures for the bucket lifecycle toolkit."""

# pylint: disable=wrong-import-position

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest


@pytest.fixture(autouse=True)
def isolated_aws_env_file(tmp_path, monkeypatch):
    """Point AWS_ENV_FILE at a missing file so a developer's ~/.env never leaks into tests.

    Tests that need a .env file write one to this path.
    """
    env_file = tmp_path / ".env"
    monkeypatch.setenv("AWS_ENV_FILE", str(env_file))
    yield env_file
