"""
Shared AWS credential loading utilities.

Thin wrappers over the client factory used by the CLI to fail early, with a
helpful message, before any bucket is touched.
"""

from bucket_toolkit.common.aws_client_factory import (
    _resolve_env_path,
    load_credentials_from_env,
)
from bucket_toolkit.common.errors import MissingCredentialsError


def setup_aws_credentials(env_path=None):
    """
    Load AWS credentials from the environment or a .env file.

    Args:
        env_path: Optional path to .env file. If not provided, uses AWS_ENV_FILE or ~/.env

    Returns:
        Credentials: resolved credentials

    Raises:
        MissingCredentialsError: If AWS credentials are not found
    """
    return load_credentials_from_env(env_path)


def check_aws_credentials(env_path=None):
    """
    Check if AWS credentials can be loaded.

    Returns:
        bool: True if credentials found, False otherwise (prints error message)
    """
    try:
        load_credentials_from_env(env_path)
    except MissingCredentialsError:
        resolved_path = _resolve_env_path(env_path)
        print(f"⚠️  AWS credentials not found in the environment or {resolved_path}.")
        print("Export them (e.g. from repository secrets) or add to the .env file:")
        print("  AWS_ACCESS_KEY_ID=your-access-key")
        print("  AWS_SECRET_ACCESS_KEY=your-secret-key")
        print("  AWS_SESSION_TOKEN=optional-session-token")
        return False
    return True
