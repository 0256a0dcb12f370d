"""
Error taxonomy for bucket operations.

AWS failures surface as botocore ``ClientError`` (service answered) or
``BotoCoreError`` subclasses (service never answered). ``classify_error``
turns either into one of the typed errors below, keeping the original AWS
error text in the message.
"""

from __future__ import annotations

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectionClosedError,
    ConnectTimeoutError,
    EndpointConnectionError,
    ReadTimeoutError,
)

from bucket_toolkit.common.models import OperationStatus


class BucketOperationError(RuntimeError):
    """Base class for failures of a create/empty/delete operation."""

    status = OperationStatus.ERROR

    def __init__(self, bucket: str, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.bucket = bucket
        self.code = code


class BucketAlreadyExistsError(BucketOperationError):
    """The name is already taken, by this account or any other."""

    status = OperationStatus.ALREADY_EXISTS


class BucketNotFoundError(BucketOperationError):
    status = OperationStatus.NOT_FOUND


class PermissionDeniedError(BucketOperationError):
    """The caller's IAM policy does not allow the requested S3 action."""

    status = OperationStatus.PERMISSION_DENIED


class InvalidLocationConstraintError(BucketOperationError):
    """The region and the LocationConstraint sent to S3 disagree."""


class TransientNetworkError(BucketOperationError):
    """Throttling, server-side errors, timeouts and dropped connections."""


class BucketNotEmptyError(BucketOperationError):
    """Raised when S3 bucket cleanup leaves residual objects."""

    def __init__(self, bucket: str, code: str | None = "BucketNotEmpty") -> None:
        super().__init__(
            bucket,
            f"Bucket {bucket} still contains objects after delete pass. "
            "Re-run deletion once remaining versions are cleared.",
            code,
        )


class MissingCredentialsError(ValueError):
    """Raised when AWS credentials cannot be found in the environment or .env file."""

    def __init__(self, source: str) -> None:
        super().__init__(f"AWS credentials not found in {source}")
        self.source = source


_CODE_TO_ERROR: dict[str, type[BucketOperationError]] = {
    "BucketAlreadyExists": BucketAlreadyExistsError,
    "BucketAlreadyOwnedByYou": BucketAlreadyExistsError,
    "NoSuchBucket": BucketNotFoundError,
    "NotFound": BucketNotFoundError,
    "404": BucketNotFoundError,
    "AccessDenied": PermissionDeniedError,
    "AllAccessDisabled": PermissionDeniedError,
    "AccountProblem": PermissionDeniedError,
    "403": PermissionDeniedError,
    "Forbidden": PermissionDeniedError,
    "InvalidLocationConstraint": InvalidLocationConstraintError,
    "IllegalLocationConstraintException": InvalidLocationConstraintError,
    "BucketNotEmpty": BucketNotEmptyError,
    "SlowDown": TransientNetworkError,
    "ServiceUnavailable": TransientNetworkError,
    "InternalError": TransientNetworkError,
    "RequestTimeout": TransientNetworkError,
    "503": TransientNetworkError,
    "500": TransientNetworkError,
}

_NETWORK_ERRORS = (
    EndpointConnectionError,
    ConnectTimeoutError,
    ReadTimeoutError,
    ConnectionClosedError,
)


def error_class_for_code(code: str | None) -> type[BucketOperationError]:
    """Map an AWS error code onto the taxonomy; unknown codes are generic errors."""
    if code is None:
        return BucketOperationError
    return _CODE_TO_ERROR.get(code, BucketOperationError)


def classify_error(bucket: str, exc: Exception) -> BucketOperationError:
    """
    Translate a botocore exception into a typed bucket error.

    Args:
        bucket: Bucket the failed call targeted
        exc: Exception raised by the boto3 client

    Returns:
        BucketOperationError: Typed error; raise it ``from exc``
    """
    if isinstance(exc, BucketOperationError):
        return exc
    if isinstance(exc, ClientError):
        error = exc.response.get("Error", {})
        code = error.get("Code")
        error_class = error_class_for_code(code)
        if error_class is BucketNotEmptyError:
            return BucketNotEmptyError(bucket)
        return error_class(bucket, str(exc), code)
    if isinstance(exc, _NETWORK_ERRORS):
        return TransientNetworkError(bucket, str(exc), type(exc).__name__)
    if isinstance(exc, BotoCoreError):
        return BucketOperationError(bucket, str(exc), type(exc).__name__)
    return BucketOperationError(bucket, str(exc))


__all__ = [
    "BucketAlreadyExistsError",
    "BucketNotEmptyError",
    "BucketNotFoundError",
    "BucketOperationError",
    "InvalidLocationConstraintError",
    "MissingCredentialsError",
    "PermissionDeniedError",
    "TransientNetworkError",
    "classify_error",
    "error_class_for_code",
]
