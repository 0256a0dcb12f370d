"""
Command-line interface for creating and deleting S3 buckets.

Usage:
    bucket-lifecycle create my-bucket --region eu-west-1
    bucket-lifecycle delete --bucket-names "a, b ,c" --region us-east-1 --yes
    BUCKET_NAMES="a,b" AWS_REGION=eu-west-1 bucket-lifecycle create
"""

from __future__ import annotations

import argparse
import logging
import sys

from bucket_toolkit.batch import BatchExecutor, BatchReport, FailurePolicy, Operation
from bucket_toolkit.common.cli_utils import (
    add_bucket_selection_args,
    add_run_control_args,
    confirm_bucket_deletion,
    write_json_report,
)
from bucket_toolkit.common.credential_utils import check_aws_credentials, setup_aws_credentials
from bucket_toolkit.common.errors import MissingCredentialsError
from bucket_toolkit.common.region_policy import needs_location_constraint
from bucket_toolkit.config import ConfigurationError, resolve_bucket_names, resolve_region
from bucket_toolkit.lifecycle import BucketLifecycleManager

EXIT_USAGE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bucket-lifecycle",
        description="Create or delete S3 buckets using credentials from the environment",
    )
    subparsers = parser.add_subparsers(dest="operation", required=True)
    for operation, help_text in (
        (Operation.CREATE, "Create buckets (LocationConstraint set outside us-east-1)"),
        (Operation.DELETE, "Empty and delete buckets"),
    ):
        subparser = subparsers.add_parser(operation.value, help=help_text)
        add_bucket_selection_args(subparser)
        add_run_control_args(subparser)
    return parser


def _print_plan(operation: Operation, names: list[str], region: str) -> None:
    """Describe the calls a run would make, without touching AWS."""
    for name in names:
        if operation is Operation.CREATE:
            constraint = region if needs_location_constraint(region) else "none"
            print(f"[DRY RUN] Would create {name} in {region} (LocationConstraint: {constraint})")
        else:
            print(f"[DRY RUN] Would empty and delete {name} in {region}")
    print("\nDry run completed. No changes were made.")


def _print_summary(report: BatchReport) -> None:
    total = len(report.results)
    print(
        f"\n{report.operation.value.capitalize()} finished in {report.region}: "
        f"{len(report.succeeded)}/{total} succeeded"
    )
    for result in report.failed:
        print(f"  - {result.bucket}: {result.status.value}")


def run_operation(args: argparse.Namespace) -> int:
    """Resolve configuration, confirm, and run the batch. Returns exit code."""
    operation = Operation(args.operation)
    try:
        names = resolve_bucket_names(args.buckets, args.bucket_name, args.bucket_names)
    except ConfigurationError as exc:
        logging.error("%s", exc)
        return EXIT_USAGE_ERROR
    region = resolve_region(args.region)
    logging.debug("%s %d bucket(s) in %s", operation.value, len(names), region)

    if args.dry_run:
        _print_plan(operation, names, region)
        return 0

    if operation is Operation.DELETE and not confirm_bucket_deletion(names, args.yes):
        print("Aborted by user.")
        return 0

    try:
        credentials = setup_aws_credentials(args.env_file)
    except MissingCredentialsError:
        check_aws_credentials(args.env_file)
        return EXIT_USAGE_ERROR

    executor = BatchExecutor(
        BucketLifecycleManager(credentials=credentials),
        failure_policy=FailurePolicy.STOP if args.fail_fast else FailurePolicy.CONTINUE,
        treat_existing_as_success=args.ignore_existing,
    )
    report = executor.run(names, region, operation)
    _print_summary(report)

    if args.report:
        write_json_report(report.to_dict(), args.report)
        print(f"Results written to {args.report}")
    return report.exit_code


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the bucket-lifecycle CLI."""
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )
    # botocore is chatty at DEBUG and logs request headers
    logging.getLogger("botocore").setLevel(logging.WARNING)
    return run_operation(args)


if __name__ == "__main__":
    raise SystemExit(main())
