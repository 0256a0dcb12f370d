"""
Apply one bucket operation across a list of bucket names.

Buckets are processed sequentially in input order. By default a failure is
logged and recorded and the loop moves on to the next bucket; the STOP
policy halts at the first failure and marks the rest as skipped.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from bucket_toolkit.common.errors import BucketOperationError
from bucket_toolkit.common.models import (
    BucketSpec,
    OperationResult,
    OperationStatus,
)
from bucket_toolkit.config import split_bucket_names
from bucket_toolkit.lifecycle import BucketLifecycleManager


class Operation(enum.Enum):
    CREATE = "create"
    DELETE = "delete"


class FailurePolicy(enum.Enum):
    CONTINUE = "continue"
    STOP = "stop"


def parse_bucket_names(raw: str) -> list[str]:
    """Parse "a, b ,c" into ["a", "b", "c"]."""
    return split_bucket_names(raw)


@dataclass
class BatchReport:
    """Ordered results of a batch run."""

    operation: Operation
    region: str
    results: list[OperationResult] = field(default_factory=list)

    @property
    def succeeded(self) -> list[OperationResult]:
        return [result for result in self.results if result.ok]

    @property
    def failed(self) -> list[OperationResult]:
        return [result for result in self.results if not result.ok]

    @property
    def exit_code(self) -> int:
        return 0 if all(result.ok for result in self.results) else 1

    def to_dict(self) -> dict:
        return {
            "operation": self.operation.value,
            "region": self.region,
            "succeeded": len(self.succeeded),
            "failed": len(self.failed),
            "results": [result.to_dict() for result in self.results],
        }


class BatchExecutor:
    """Runs create or delete over many buckets with best-effort semantics."""

    def __init__(
        self,
        manager: BucketLifecycleManager,
        failure_policy: FailurePolicy = FailurePolicy.CONTINUE,
        treat_existing_as_success: bool = False,
    ):
        self.manager = manager
        self.failure_policy = failure_policy
        self.treat_existing_as_success = treat_existing_as_success

    def _tolerated(self, operation: Operation, status: OperationStatus) -> bool:
        if not self.treat_existing_as_success:
            return False
        if operation is Operation.CREATE:
            return status is OperationStatus.ALREADY_EXISTS
        return status is OperationStatus.NOT_FOUND

    def run_one(self, name: str, region: str, operation: Operation) -> OperationResult:
        """Run an operation on a single bucket, converting failures into a result."""
        try:
            spec = BucketSpec(name, region)
        except ValueError as exc:
            logging.error("Skipping %s: %s", name, exc)
            return OperationResult(name, OperationStatus.ERROR, str(exc))

        try:
            if operation is Operation.CREATE:
                return self.manager.create(spec)
            return self.manager.delete(spec)
        except BucketOperationError as exc:
            if self._tolerated(operation, exc.status):
                logging.info("%s %s: %s (ignored)", operation.value, name, exc.status.value)
                return OperationResult(
                    name,
                    OperationStatus.SUCCESS,
                    f"Nothing to do ({exc.status.value}): {exc}",
                )
            logging.error("Failed to %s bucket %s: %s", operation.value, name, exc)
            return OperationResult(name, exc.status, str(exc))

    def run(
        self,
        names: Sequence[str] | str,
        region: str,
        operation: Operation | str,
    ) -> BatchReport:
        """
        Apply operation to every bucket name, in order.

        Args:
            names: Bucket names, or a single comma-separated string
            region: Region shared by every bucket in the batch
            operation: Operation.CREATE / Operation.DELETE (or "create" / "delete")

        Returns:
            BatchReport: one OperationResult per input name, input order preserved
        """
        if isinstance(names, str):
            names = parse_bucket_names(names)
        operation = Operation(operation)
        report = BatchReport(operation=operation, region=region)

        remaining: Iterator[str] = iter(names)
        for name in remaining:
            result = self.run_one(name, region, operation)
            report.results.append(result)
            _print_result(operation, result)
            if not result.ok and self.failure_policy is FailurePolicy.STOP:
                logging.warning("Stopping batch after failure on %s", name)
                break

        for name in remaining:
            report.results.append(
                OperationResult(name, OperationStatus.SKIPPED, "Not attempted after earlier failure")
            )
        return report


def _print_result(operation: Operation, result: OperationResult) -> None:
    if result.ok:
        print(f"✅ {operation.value} {result.bucket}: {result.message}")
    else:
        print(f"❌ {operation.value} {result.bucket} [{result.status.value}]: {result.message}")


__all__ = [
    "BatchExecutor",
    "BatchReport",
    "FailurePolicy",
    "Operation",
    "parse_bucket_names",
]
