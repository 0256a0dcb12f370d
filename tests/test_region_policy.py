"""Tests for bucket_toolkit/common/region_policy.py"""

from __future__ import annotations

import pytest

from bucket_toolkit.common.errors import InvalidLocationConstraintError
from bucket_toolkit.common.models import BucketSpec
from bucket_toolkit.common.region_policy import (
    check_location_constraint,
    create_bucket_request,
    needs_location_constraint,
)
from tests.assertions import assert_equal

NON_DEFAULT_REGIONS = [
    "us-east-2",
    "us-west-1",
    "us-west-2",
    "eu-west-1",
    "eu-central-1",
    "ap-southeast-1",
    "sa-east-1",
    "us-gov-west-1",
]


def test_us_east_1_needs_no_location_constraint():
    assert needs_location_constraint("us-east-1") is False


@pytest.mark.parametrize("region", NON_DEFAULT_REGIONS)
def test_every_other_region_needs_location_constraint(region):
    assert needs_location_constraint(region) is True


def test_create_bucket_request_us_east_1():
    """us-east-1 requests carry no CreateBucketConfiguration."""
    request = create_bucket_request(BucketSpec("my-bucket", "us-east-1"))

    assert_equal(request, {"Bucket": "my-bucket"})


def test_create_bucket_request_eu_west_1():
    """Other regions send a LocationConstraint equal to the region."""
    request = create_bucket_request(BucketSpec("my-bucket", "eu-west-1"))

    assert_equal(
        request,
        {
            "Bucket": "my-bucket",
            "CreateBucketConfiguration": {"LocationConstraint": "eu-west-1"},
        },
    )


def test_check_location_constraint_accepts_policy_values():
    check_location_constraint("b", "us-east-1", None)
    check_location_constraint("b", "eu-west-1", "eu-west-1")


def test_check_location_constraint_rejects_constraint_for_us_east_1():
    with pytest.raises(InvalidLocationConstraintError, match="must not specify"):
        check_location_constraint("b", "us-east-1", "us-east-1")


@pytest.mark.parametrize("constraint", [None, "us-west-2"])
def test_check_location_constraint_rejects_mismatch(constraint):
    with pytest.raises(InvalidLocationConstraintError) as exc_info:
        check_location_constraint("b", "eu-west-1", constraint)
    assert_equal(exc_info.value.code, "InvalidLocationConstraint")
