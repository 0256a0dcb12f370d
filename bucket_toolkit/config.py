"""
Configuration for the bucket lifecycle toolkit.

Values come from command-line flags first, then from environment variables
(how CI workflows hand over dispatch inputs), then from defaults below.
"""

from __future__ import annotations

import os

from bucket_toolkit.common.models import US_EAST_1

DEFAULT_REGION: str = US_EAST_1

# delete_objects accepts at most 1000 keys per request
DELETE_BATCH_SIZE: int = 1000

REGION_ENV_VARS = ("AWS_REGION", "AWS_DEFAULT_REGION")
BUCKET_NAMES_ENV_VAR = "BUCKET_NAMES"
BUCKET_NAME_ENV_VAR = "BUCKET_NAME"


class ConfigurationError(RuntimeError):
    """Raised when required configuration is missing."""


def split_bucket_names(raw: str | None) -> list[str]:
    """Split a comma-separated list, trimming whitespace and dropping empty entries."""
    if not raw:
        return []
    return [name.strip() for name in raw.split(",") if name.strip()]


def resolve_region(cli_value: str | None = None) -> str:
    """Return the region from the CLI, AWS_REGION, AWS_DEFAULT_REGION, or us-east-1."""
    if cli_value and cli_value.strip():
        return cli_value.strip()
    for name in REGION_ENV_VARS:
        env_val = os.environ.get(name)
        if env_val and env_val.strip():
            return env_val.strip()
    return DEFAULT_REGION


def resolve_bucket_names(
    positional: list[str] | None = None,
    bucket_name: str | None = None,
    bucket_names: str | None = None,
) -> list[str]:
    """
    Collect bucket names from CLI arguments, falling back to environment variables.

    Command-line sources are combined in the order positional, --bucket-name,
    --bucket-names. Environment variables are only read when no command-line
    source was given: BUCKET_NAMES first, then BUCKET_NAME.

    Raises:
        ConfigurationError: If no bucket names are supplied anywhere
    """
    names: list[str] = []
    for value in positional or []:
        names.extend(split_bucket_names(value))
    if bucket_name and bucket_name.strip():
        names.append(bucket_name.strip())
    names.extend(split_bucket_names(bucket_names))
    if names:
        return names

    names = split_bucket_names(os.environ.get(BUCKET_NAMES_ENV_VAR))
    if names:
        return names
    single = os.environ.get(BUCKET_NAME_ENV_VAR, "").strip()
    if single:
        return [single]

    raise ConfigurationError(
        "No bucket names given. Pass them as arguments, with --bucket-name/--bucket-names, "
        f"or set {BUCKET_NAMES_ENV_VAR}/{BUCKET_NAME_ENV_VAR}."
    )
