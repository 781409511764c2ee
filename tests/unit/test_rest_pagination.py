"""Tests for REST page size and offset parsing."""

import pytest

from src.projectbase.api.v1.data import clamp_limit, clamp_offset

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, 100),
        ("10", 10),
        ("1000", 1000),
        ("5000", 1000),
        ("0", 100),
        ("-3", 100),
        ("abc", 100),
        ("", 100),
    ],
)
def test_clamp_limit(raw, expected):
    assert clamp_limit(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, 0),
        ("25", 25),
        ("-1", 0),
        ("abc", 0),
    ],
)
def test_clamp_offset(raw, expected):
    assert clamp_offset(raw) == expected
