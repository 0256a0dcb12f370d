"""
Data model shared by the lifecycle manager, batch executor and CLI.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field

US_EAST_1 = "us-east-1"

MIN_BUCKET_NAME_LENGTH = 3
MAX_BUCKET_NAME_LENGTH = 63

_BUCKET_NAME_PATTERN = re.compile(r"^[a-z0-9][a-z0-9.-]*[a-z0-9]$")
_IPV4_PATTERN = re.compile(r"^\d{1,3}(\.\d{1,3}){3}$")
_RESERVED_PREFIXES = ("xn--", "sthree-", "amzn-s3-demo-")
_RESERVED_SUFFIXES = ("-s3alias", "--ol-s3", "--x-s3", ".mrap")


class InvalidBucketNameError(ValueError):
    """Raised when a bucket name violates S3 naming rules."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Invalid bucket name {name!r}: {reason}")
        self.name = name
        self.reason = reason


def validate_bucket_name(name: str) -> str:
    """
    Check a bucket name against the S3 general purpose bucket naming rules.

    Args:
        name: Candidate bucket name

    Returns:
        str: The name, unchanged

    Raises:
        InvalidBucketNameError: If the name is not DNS-compatible
    """
    if not name:
        raise InvalidBucketNameError(name, "name is empty")
    if not MIN_BUCKET_NAME_LENGTH <= len(name) <= MAX_BUCKET_NAME_LENGTH:
        raise InvalidBucketNameError(
            name,
            f"must be between {MIN_BUCKET_NAME_LENGTH} and {MAX_BUCKET_NAME_LENGTH} characters",
        )
    if not _BUCKET_NAME_PATTERN.match(name):
        raise InvalidBucketNameError(
            name,
            "only lowercase letters, digits, dots and hyphens are allowed, "
            "and it must begin and end with a letter or digit",
        )
    if ".." in name:
        raise InvalidBucketNameError(name, "must not contain two adjacent periods")
    if _IPV4_PATTERN.match(name):
        raise InvalidBucketNameError(name, "must not be formatted as an IP address")
    if name.startswith(_RESERVED_PREFIXES):
        raise InvalidBucketNameError(name, "uses a reserved prefix")
    if name.endswith(_RESERVED_SUFFIXES):
        raise InvalidBucketNameError(name, "uses a reserved suffix")
    return name


@dataclass(frozen=True)
class BucketSpec:
    """A bucket to act on: its globally unique name and its home region."""

    name: str
    region: str

    def __post_init__(self):
        validate_bucket_name(self.name)
        if not self.region or not self.region.strip():
            raise ValueError("BucketSpec.region must be a non-empty string.")

    @property
    def location_constraint(self) -> str | None:
        """S3 returns and expects no constraint for us-east-1."""
        if self.region == US_EAST_1:
            return None
        return self.region


@dataclass(frozen=True)
class Credentials:
    """AWS access credentials sourced from the environment; never persisted."""

    access_key_id: str
    secret_access_key: str = field(repr=False)
    session_token: str | None = field(default=None, repr=False)

    def __post_init__(self):
        if not self.access_key_id or not self.secret_access_key:
            raise ValueError(
                "Credentials require both access_key_id and secret_access_key."
            )

    def as_client_kwargs(self) -> dict[str, str]:
        """Keyword arguments accepted by boto3.client()."""
        kwargs = {
            "aws_access_key_id": self.access_key_id,
            "aws_secret_access_key": self.secret_access_key,
        }
        if self.session_token:
            kwargs["aws_session_token"] = self.session_token
        return kwargs


class OperationStatus(enum.Enum):
    """Outcome of a single bucket operation."""

    SUCCESS = "Success"
    ALREADY_EXISTS = "AlreadyExists"
    NOT_FOUND = "NotFound"
    PERMISSION_DENIED = "PermissionDenied"
    ERROR = "Error"
    SKIPPED = "Skipped"


@dataclass(frozen=True)
class OperationResult:
    bucket: str
    status: OperationStatus
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is OperationStatus.SUCCESS

    def to_dict(self) -> dict[str, str]:
        return {"bucket": self.bucket, "status": self.status.value, "message": self.message}


__all__ = [
    "BucketSpec",
    "Credentials",
    "InvalidBucketNameError",
    "OperationResult",
    "OperationStatus",
    "US_EAST_1",
    "validate_bucket_name",
]
