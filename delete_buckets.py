#!/usr/bin/env python3
"""
Empty and delete S3 buckets.

Usage:
    python delete_buckets.py bucket1 [bucket2 ...] --region eu-west-1
    python delete_buckets.py --bucket-names "a, b ,c" --yes    # No confirmation prompt
    python delete_buckets.py --fail-fast a b c                 # Stop at the first failure
"""

from __future__ import annotations

import sys

from bucket_toolkit.cli import main as cli_main


def run(argv: list[str] | None = None) -> int:
    """Run the delete subcommand of the bucket-lifecycle CLI."""
    return cli_main(["delete", *(sys.argv[1:] if argv is None else argv)])


if __name__ == "__main__":
    raise SystemExit(run())
