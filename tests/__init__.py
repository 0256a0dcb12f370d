"""Test suite package marker."""

import pytest

# Ensure shared helper modules are assertion-rewritten before import.
pytest.register_assert_rewrite("tests.assertions")
pytest.register_assert_rewrite("tests.s3_test_utils")
