"""S3 bucket lifecycle toolkit: create and delete buckets from CI or the shell."""

__version__ = "0.1.0"
