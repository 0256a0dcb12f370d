#!/usr/bin/env python3
"""
AWS Client Factory Module
Resolves credentials from the environment and builds boto3 S3 clients.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import boto3
from dotenv import load_dotenv

from bucket_toolkit.common.errors import MissingCredentialsError
from bucket_toolkit.common.models import Credentials


def _resolve_env_path(env_path: Optional[str] = None) -> str:
    """
    Determine which .env file should be used for AWS credentials.

    Priority order:
      1. Explicit parameter
      2. AWS_ENV_FILE environment variable
      3. ~/.env
    """
    if env_path:
        return env_path
    aws_env_file = os.environ.get("AWS_ENV_FILE")
    if aws_env_file:
        return aws_env_file
    return str(Path.home() / ".env")


def load_credentials_from_env(env_path: Optional[str] = None) -> Credentials:
    """
    Load AWS credentials from the process environment, falling back to a .env file.

    Variables already exported (as CI secret stores do) win over the .env file,
    since load_dotenv never overrides existing environment variables.

    Args:
        env_path: Optional override path (defaults to AWS_ENV_FILE or ~/.env)

    Returns:
        Credentials: access key, secret key and optional session token

    Raises:
        MissingCredentialsError: If the key pair is not available
    """
    resolved_path = _resolve_env_path(env_path)
    load_dotenv(resolved_path)

    aws_access_key_id = os.getenv("AWS_ACCESS_KEY_ID")
    aws_secret_access_key = os.getenv("AWS_SECRET_ACCESS_KEY")
    aws_session_token = os.getenv("AWS_SESSION_TOKEN")
    if aws_access_key_id and aws_secret_access_key:
        logging.info("✅ AWS credentials loaded (environment or %s)", resolved_path)
        if aws_session_token:
            logging.info("✅ AWS session token loaded")
        return Credentials(aws_access_key_id, aws_secret_access_key, aws_session_token or None)

    raise MissingCredentialsError(f"the environment or {resolved_path}")


def create_client(
    service_name: str,
    region: Optional[str] = None,
    credentials: Optional[Credentials] = None,
):
    """
    Create a boto3 client for an AWS service with explicit credentials.

    Args:
        service_name: AWS service name (e.g., 's3', 'sts')
        region: AWS region name (optional for global services)
        credentials: Credentials to use (loaded from env if not provided)

    Returns:
        boto3.client: Configured AWS service client
    """
    if credentials is None:
        credentials = load_credentials_from_env()

    client_kwargs = credentials.as_client_kwargs()
    if region is not None:
        client_kwargs["region_name"] = region

    return boto3.client(service_name, **client_kwargs)


def create_s3_client(region: str, credentials: Optional[Credentials] = None):
    """Create an S3 boto3 client with credentials."""
    return create_client("s3", region, credentials)


if __name__ == "__main__":  # pragma: no cover - script entry point
    pass
