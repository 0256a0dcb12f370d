"""Create, empty and delete S3 buckets."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from bucket_toolkit.common.aws_client_factory import create_s3_client
from bucket_toolkit.common.errors import (
    BucketNotEmptyError,
    BucketNotFoundError,
    BucketOperationError,
    classify_error,
    error_class_for_code,
)
from bucket_toolkit.common.models import BucketSpec, Credentials, OperationResult, OperationStatus
from bucket_toolkit.common.region_policy import create_bucket_request
from bucket_toolkit.config import DELETE_BATCH_SIZE

ClientFactory = Callable[[str], object]


def _chunked(items: List[dict], size: int) -> Iterator[List[dict]]:
    for start in range(0, len(items), size):
        yield items[start : start + size]


class BucketLifecycleManager:
    """Runs bucket operations against S3, one client per region."""

    def __init__(
        self,
        client_factory: Optional[ClientFactory] = None,
        credentials: Optional[Credentials] = None,
    ):
        self._client_factory = client_factory or (
            lambda region: create_s3_client(region, credentials)
        )
        self._clients: dict = {}

    def client_for(self, region: str):
        """Return the cached S3 client for region, creating it on first use."""
        if region not in self._clients:
            self._clients[region] = self._client_factory(region)
        return self._clients[region]

    def create(self, spec: BucketSpec) -> OperationResult:
        """
        Create a bucket, sending a LocationConstraint only outside us-east-1.

        Raises:
            BucketAlreadyExistsError: If the name is taken in any account
            PermissionDeniedError: If s3:CreateBucket is not allowed
            BucketOperationError: For any other S3 failure
        """
        request = create_bucket_request(spec)
        s3 = self.client_for(spec.region)
        try:
            s3.create_bucket(**request)
        except (ClientError, BotoCoreError) as exc:
            raise classify_error(spec.name, exc) from exc
        logging.info("Created bucket %s in %s", spec.name, spec.region)
        return OperationResult(spec.name, OperationStatus.SUCCESS, f"Created in {spec.region}")

    def exists(self, spec: BucketSpec) -> bool:
        """Probe a bucket with head_bucket; False when S3 answers 404."""
        s3 = self.client_for(spec.region)
        try:
            s3.head_bucket(Bucket=spec.name)
        except (ClientError, BotoCoreError) as exc:
            error = classify_error(spec.name, exc)
            if isinstance(error, BucketNotFoundError):
                return False
            raise error from exc
        return True

    @staticmethod
    def _collect_objects_to_delete(page) -> List[dict]:
        """Collect all object versions and delete markers from a page."""
        objects_to_delete = []
        for version in page.get("Versions", []):
            objects_to_delete.append({"Key": version["Key"], "VersionId": version["VersionId"]})
        for marker in page.get("DeleteMarkers", []):
            objects_to_delete.append({"Key": marker["Key"], "VersionId": marker["VersionId"]})
        return objects_to_delete

    @staticmethod
    def _raise_delete_errors(bucket: str, errors: Iterable[dict]) -> None:
        errors = list(errors)
        if not errors:
            return
        for error in errors:
            logging.error(
                "Delete failed in %s: Key=%s VersionId=%s Code=%s Message=%s",
                bucket,
                error.get("Key"),
                error.get("VersionId"),
                error.get("Code"),
                error.get("Message"),
            )
        first = errors[0]
        code = first.get("Code")
        error_class = error_class_for_code(code)
        if error_class is BucketNotEmptyError:
            error_class = BucketOperationError
        raise error_class(
            bucket,
            f"Failed to delete {len(errors)} object(s) from {bucket}: "
            f"{code}: {first.get('Message')} (key {first.get('Key')!r})",
            code,
        )

    def _abort_multipart_uploads(self, s3, bucket: str) -> int:
        """Abort any in-progress multipart uploads for the bucket."""
        paginator = s3.get_paginator("list_multipart_uploads")
        aborted = 0
        for page in paginator.paginate(Bucket=bucket):
            for upload in page.get("Uploads", []):
                s3.abort_multipart_upload(
                    Bucket=bucket,
                    Key=upload["Key"],
                    UploadId=upload["UploadId"],
                )
                aborted += 1
        if aborted:
            logging.info("Aborted %d multipart upload(s) in %s", aborted, bucket)
        return aborted

    def _bucket_has_contents(self, s3, bucket: str) -> bool:
        """Return True if any versions/delete markers remain in the bucket."""
        paginator = s3.get_paginator("list_object_versions")
        for page in paginator.paginate(Bucket=bucket, PaginationConfig={"MaxItems": 1}):
            if page.get("Versions") or page.get("DeleteMarkers"):
                return True
        return False

    def empty(self, spec: BucketSpec) -> int:
        """
        Remove every object version and delete marker from a bucket.

        Works for unversioned buckets too, where each object has the
        version id "null". In-progress multipart uploads are aborted last.

        Returns:
            int: Number of versions and delete markers removed

        Raises:
            BucketNotFoundError: If the bucket does not exist
            PermissionDeniedError: If s3:DeleteObject or listing is not allowed
        """
        s3 = self.client_for(spec.region)
        deleted_count = 0
        try:
            paginator = s3.get_paginator("list_object_versions")
            for page in paginator.paginate(Bucket=spec.name):
                objects_to_delete = self._collect_objects_to_delete(page)
                for chunk in _chunked(objects_to_delete, DELETE_BATCH_SIZE):
                    response = s3.delete_objects(
                        Bucket=spec.name, Delete={"Objects": chunk, "Quiet": True}
                    )
                    errors = response.get("Errors", [])
                    self._raise_delete_errors(spec.name, errors)
                    deleted_count += len(chunk)
                    logging.debug("Deleted %d object(s) from %s so far", deleted_count, spec.name)
            self._abort_multipart_uploads(s3, spec.name)
        except (ClientError, BotoCoreError) as exc:
            raise classify_error(spec.name, exc) from exc
        logging.info("Emptied bucket %s (%d object version(s) removed)", spec.name, deleted_count)
        return deleted_count

    def delete(self, spec: BucketSpec) -> OperationResult:
        """
        Empty a bucket and then delete it.

        Raises:
            BucketNotFoundError: If the bucket does not exist
            PermissionDeniedError: If s3:DeleteObject or s3:DeleteBucket is not allowed
            BucketNotEmptyError: If objects remain after the delete pass
        """
        removed = self.empty(spec)
        s3 = self.client_for(spec.region)
        try:
            if self._bucket_has_contents(s3, spec.name):
                raise BucketNotEmptyError(spec.name)
            s3.delete_bucket(Bucket=spec.name)
        except (ClientError, BotoCoreError) as exc:
            raise classify_error(spec.name, exc) from exc
        logging.info("Deleted bucket %s", spec.name)
        return OperationResult(
            spec.name,
            OperationStatus.SUCCESS,
            f"Deleted ({removed} object version(s) removed first)",
        )


__all__ = ["BucketLifecycleManager", "ClientFactory"]
