"""Tests for identifier and limit validation"""

import pytest

from mybot_api.validation import (
    CALLS_LIMIT,
    LIST_LIMIT,
    clamp_limit,
    is_valid_identifier,
    normalize_identifier,
)

VALID_ID = "3f2b8c9e-4d1a-4b7e-9c2f-1a2b3c4d5e6f"


@pytest.mark.parametrize(
    "value",
    [
        VALID_ID,
        VALID_ID.upper(),
        f"  {VALID_ID}\n",
        f"%20{VALID_ID}%20",
        VALID_ID.replace("-", "%2D"),
        "00000000-0000-0000-0000-000000000000",
        "ffffffff-ffff-ffff-ffff-ffffffffffff",
        # Legacy ids with non-RFC version and variant nibbles
        "3f2b8c9e-4d1a-0b7e-0c2f-1a2b3c4d5e6f",
        "3f2b8c9e-4d1a-fb7e-fc2f-1a2b3c4d5e6f",
    ],
)
def test_accepts_hyphenated_hex_uuids(value):
    assert is_valid_identifier(value) is True


@pytest.mark.parametrize(
    "value",
    [
        None,
        123,
        "",
        "   ",
        "not-a-uuid",
        VALID_ID.replace("-", ""),
        "{" + VALID_ID + "}",
        "urn:uuid:" + VALID_ID,
        VALID_ID[:-1],
        VALID_ID + "0",
        VALID_ID.replace("3f", "zz", 1),
        VALID_ID.replace("-", "_"),
    ],
)
def test_rejects_everything_else(value):
    assert is_valid_identifier(value) is False


def test_normalize_decodes_then_trims():
    assert normalize_identifier(f"%20{VALID_ID}%09") == VALID_ID
    assert normalize_identifier(None) is None


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 25),
        ("", 25),
        ("abc", 25),
        ("12.5", 25),
        ("10abc", 25),
        ("10", 10),
        (" 42 ", 42),
        ("+7", 7),
        ("0", 1),
        ("-5", 1),
        ("200", 200),
        ("201", 200),
        ("99999999999999999999", 200),
        (7, 7),
    ],
)
def test_clamp_limit_list_calibration(raw, expected):
    assert clamp_limit(raw, *LIST_LIMIT) == expected


def test_clamp_limit_calls_calibration_defaults_to_50():
    assert clamp_limit(None, *CALLS_LIMIT) == 50
    assert clamp_limit("nope", *CALLS_LIMIT) == 50
    assert clamp_limit("500", *CALLS_LIMIT) == 200


def test_clamp_limit_stays_in_range_for_odd_input():
    for raw in [None, "", "x", "-1", "0", "1", "150", "10e3", "1" * 40, [], {}, True]:
        value = clamp_limit(raw, 25, 1, 200)
        assert 1 <= value <= 200


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("9" * 5000, 200),
        ("+" + "9" * 5000, 200),
        ("-" + "9" * 5000, 1),
        ("0" * 5000 + "42", 42),
        ("-0", 1),
    ],
)
def test_clamp_limit_handles_very_long_digit_strings(raw, expected):
    assert clamp_limit(raw, *LIST_LIMIT) == expected
