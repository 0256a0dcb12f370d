#!/usr/bin/env python3
"""
Create S3 buckets.

Usage:
    python create_buckets.py bucket1 [bucket2 ...] --region eu-west-1
    python create_buckets.py --bucket-names "a, b ,c" --region us-east-1
    python create_buckets.py --dry-run my-bucket       # Show the create call only
"""

from __future__ import annotations

import sys

from bucket_toolkit.cli import main as cli_main


def run(argv: list[str] | None = None) -> int:
    """Run the create subcommand of the bucket-lifecycle CLI."""
    return cli_main(["create", *(sys.argv[1:] if argv is None else argv)])


if __name__ == "__main__":
    raise SystemExit(run())
