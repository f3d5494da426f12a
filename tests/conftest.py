"""
Pytest configuration for pool ladder tests.
"""

import os
import sys
from datetime import datetime, timezone
from pathlib import Path

# Keep test runs from writing daily log files
os.environ.setdefault('LADDER_LOG_TO_FILE', 'false')

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import pytest


@pytest.fixture
def now():
    """Fixed reference time: Wednesday 15 May 2024, noon UTC."""
    return datetime(2024, 5, 15, 12, 0, tzinfo=timezone.utc)

