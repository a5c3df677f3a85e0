"""
Shared pytest fixtures for envconfig tests.

Every test runs against an empty process environment so that variables such
as PORT or NAME on the host never leak into lookups.
"""

import os
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def clean_environ():
    """Run each test with an empty os.environ, restored afterwards."""
    with patch.dict(os.environ, {}, clear=True):
        yield
