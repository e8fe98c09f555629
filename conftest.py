"""
Root conftest.py - Sets up Python path for tests.

This conftest is loaded by pytest before any test collection begins, so the
``chromapick`` package resolves from a plain checkout.
"""
import logging
import os
import sys

import pytest

# Get the project root (where this conftest.py lives)
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture
def debug_logs(caplog):
    caplog.set_level(logging.DEBUG, logger="chromapick")
    return caplog
