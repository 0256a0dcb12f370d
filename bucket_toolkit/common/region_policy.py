"""
Region rules for S3 bucket creation.

us-east-1 is the only region where create_bucket must be sent without a
CreateBucketConfiguration; every other region requires a LocationConstraint
equal to the region itself.
"""

from __future__ import annotations

from bucket_toolkit.common.errors import InvalidLocationConstraintError
from bucket_toolkit.common.models import US_EAST_1, BucketSpec


def needs_location_constraint(region: str) -> bool:
    """Return True when create_bucket must carry a LocationConstraint for region."""
    return region != US_EAST_1


def check_location_constraint(bucket: str, region: str, constraint: str | None) -> None:
    """
    Validate an explicit LocationConstraint against the region policy.

    Args:
        bucket: Bucket name, for the error message
        region: Target region
        constraint: Constraint the caller intends to send (None for none)

    Raises:
        InvalidLocationConstraintError: If the constraint breaks the policy
    """
    if not needs_location_constraint(region):
        if constraint is not None:
            raise InvalidLocationConstraintError(
                bucket,
                f"{US_EAST_1} buckets must not specify a LocationConstraint (got {constraint!r})",
                "InvalidLocationConstraint",
            )
        return
    if constraint != region:
        raise InvalidLocationConstraintError(
            bucket,
            f"LocationConstraint {constraint!r} does not match region {region!r}",
            "InvalidLocationConstraint",
        )


def create_bucket_request(spec: BucketSpec) -> dict:
    """
    Build keyword arguments for s3.create_bucket().

    Args:
        spec: Bucket to create

    Returns:
        dict: ``{"Bucket": ...}`` plus CreateBucketConfiguration outside us-east-1
    """
    constraint = spec.location_constraint
    check_location_constraint(spec.name, spec.region, constraint)
    request = {"Bucket": spec.name}
    if constraint is not None:
        request["CreateBucketConfiguration"] = {"LocationConstraint": constraint}
    return request
