"""Shared helpers for the bucket lifecycle toolkit."""
