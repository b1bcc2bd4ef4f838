"""Pytest configuration and fixtures for timeduration tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so timeduration can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

MAX_SAFE_INTEGER = 2**53 - 1
MAX_NS = 9_007_199_254_740_991_999_999_999


@pytest.fixture
def sample_durations() -> list:
    """Durations spread across the whole range, both signs, including the bounds."""
    from timeduration import TimeDuration

    values = [
        0,
        1,
        -1,
        999_999_999,
        -999_999_999,
        1_000_000_000,
        -1_000_000_000,
        90_061_333_666_999,
        -90_061_333_666_999,
        86_400_000_000_000 // 2,
        -(86_400_000_000_000 // 2),
        123_456_789_012_345_678_901,
        -123_456_789_012_345_678_901,
        MAX_NS - 1,
        MAX_NS,
        -MAX_NS,
    ]
    return [TimeDuration(v) for v in values]
