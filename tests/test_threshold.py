import pytest

from hitstats.errors import InvalidThresholdError
from hitstats.model.threshold import (
    AdaptiveThreshold,
    FixedThreshold,
    adaptive_threshold,
    parse_threshold,
    is_threshold_token,
    resolve_threshold,
    round_half_up,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (0, FixedThreshold(0)),
        (10, FixedThreshold(10)),
        ("25", FixedThreshold(25)),
        (" 7 ", FixedThreshold(7)),
        (-1, AdaptiveThreshold()),
        ("-1", AdaptiveThreshold()),
        ("auto", AdaptiveThreshold()),
        ("AUTO", AdaptiveThreshold()),
        (FixedThreshold(3), FixedThreshold(3)),
    ],
)
def test_parse_threshold(raw: object, expected: object) -> None:
    assert parse_threshold(raw) == expected


@pytest.mark.parametrize("raw", [-2, "-5", "ten", "", "1.5", True, "adaptive"])
def test_parse_threshold_rejects_invalid_input(raw: object) -> None:
    with pytest.raises(InvalidThresholdError):
        parse_threshold(raw)


def test_invalid_threshold_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="invalid threshold"):
        parse_threshold("nope")


def test_fixed_threshold_rejects_negative_values() -> None:
    with pytest.raises(InvalidThresholdError, match="non-negative"):
        FixedThreshold(-3)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.0, 0), (0.49, 0), (0.5, 1), (1.5, 2), (2.5, 3), (23.999, 24), (24.0, 24)],
)
def test_round_half_up(value: float, expected: int) -> None:
    assert round_half_up(value) == expected


def test_adaptive_threshold_is_twenty_percent_above_average() -> None:
    assert adaptive_threshold(5, 100) == 24


def test_adaptive_threshold_without_records_is_zero() -> None:
    assert adaptive_threshold(0, 0) == 0


def test_adaptive_threshold_rounds_ties_up() -> None:
    # average 1.25 -> 1.5 after the margin
    assert adaptive_threshold(4, 5) == 2


def test_resolve_threshold() -> None:
    assert resolve_threshold(FixedThreshold(4), count=5, total=100) == FixedThreshold(4)
    assert resolve_threshold(AdaptiveThreshold(), count=5, total=100) == FixedThreshold(24)
    assert resolve_threshold(AdaptiveThreshold(), count=0, total=0) == FixedThreshold(0)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("10", True), ("-1", True), ("-5", True), (" auto ", True), ("a/b", False), ("adaptive", False), ("", False)],
)
def test_is_threshold_token(raw: str, expected: bool) -> None:
    assert is_threshold_token(raw) is expected
