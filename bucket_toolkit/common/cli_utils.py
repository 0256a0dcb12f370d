"""
Shared CLI utilities for common command-line patterns.
"""

import argparse
import json


def add_bucket_selection_args(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """
    Add the bucket and region selection arguments shared by create and delete.

    Args:
        parser: argparse.ArgumentParser instance to add arguments to

    Returns:
        The same parser instance (for chaining)
    """
    parser.add_argument(
        "buckets",
        nargs="*",
        help="Bucket names (each may itself be a comma-separated list)",
    )
    parser.add_argument("--bucket-name", help="A single bucket name (env: BUCKET_NAME)")
    parser.add_argument(
        "--bucket-names",
        help='Comma-separated bucket names, e.g. "a, b ,c" (env: BUCKET_NAMES)',
    )
    parser.add_argument(
        "--region",
        help="Region shared by all buckets (env: AWS_REGION / AWS_DEFAULT_REGION, default: us-east-1)",
    )
    return parser


def add_run_control_args(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Add the flags controlling failure handling, confirmation and output."""
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first failed bucket and skip the rest.",
    )
    parser.add_argument(
        "--ignore-existing",
        action="store_true",
        help="Treat create-on-existing and delete-on-missing as success.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be done without making changes.",
    )
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Skip the confirmation prompt before deleting buckets.",
    )
    parser.add_argument("--report", help="Write JSON results to this path.")
    parser.add_argument(
        "--env-file",
        help="Path to a .env file with AWS credentials (env: AWS_ENV_FILE, default: ~/.env)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    return parser


def confirm_action(message, skip_prompt=False, exact_match=None):
    """
    Prompt user to confirm an action with flexible confirmation patterns.

    Args:
        message: Prompt message to display to the user
        skip_prompt: If True, skip confirmation and return True
        exact_match: If provided, user must type this exact string to confirm
                    If None, accepts 'y' or 'yes' (case-insensitive)

    Returns:
        bool: True if user confirmed or prompt was skipped, False otherwise
    """
    if skip_prompt:
        return True

    try:
        response = input(message).strip()
    except EOFError:
        print("\nConfirmation not received.")
        return False

    if exact_match is not None:
        return response == exact_match

    return response.lower() in {"y", "yes"}


def confirm_bucket_deletion(bucket_names, skip_prompt=False):
    """Prompt for confirming permanent deletion of buckets and all their objects."""
    if not skip_prompt:
        print("The following buckets and ALL of their objects will be permanently deleted:")
        for name in bucket_names:
            print(f"  - {name}")
    return confirm_action(
        "Type 'DELETE BUCKETS' to confirm: ",
        skip_prompt=skip_prompt,
        exact_match="DELETE BUCKETS",
    )


def write_json_report(report, filename):
    """
    Save a results document to a JSON file.

    Args:
        report (dict): Results document
        filename (str): Output filename
    """
    with open(filename, "w", encoding="utf-8") as f:
        json.dump(report, f, indent=2)
