"""Tests for the Seconds/Milliseconds wrappers."""

import pytest

from timewise import Duration, DurationLike, Instant, Milliseconds, Seconds


def test_wrappers_do_not_equal_each_other():
    assert Seconds(1000) != Milliseconds(1000)
    assert Seconds(5) != 5
    assert Milliseconds(5) != 5


def test_wrappers_do_not_order_against_each_other():
    with pytest.raises(TypeError):
        Seconds(1) < Milliseconds(2)  # pyright: ignore[reportOperatorIssue]

    with pytest.raises(TypeError):
        Seconds(1) < 2  # pyright: ignore[reportOperatorIssue]


def test_wrappers_order_within_their_own_type():
    assert Seconds(1) < Seconds(2)
    assert Milliseconds(2) >= Milliseconds(2)


def test_arithmetic_within_a_unit():
    assert Seconds(10) + Seconds(5) == Seconds(15)
    assert Milliseconds(10) - Milliseconds(5) == Milliseconds(5)


def test_arithmetic_across_units_fails():
    with pytest.raises(TypeError):
        Seconds(10) + Milliseconds(5)  # pyright: ignore[reportOperatorIssue]

    with pytest.raises(TypeError):
        Milliseconds(10) - 5  # pyright: ignore[reportOperatorIssue]


def test_explicit_conversion_to_numbers():
    """Unwrapping is always explicit."""
    seconds = Instant.from_millis(1704067200000).to_seconds()

    assert int(seconds) == 1704067200
    assert float(seconds) == 1704067200.0
    assert int(seconds) * 2 == 3408134400
    assert seconds.value == 1704067200


def test_str_shows_the_unit():
    assert str(Seconds(5)) == "5s"
    assert str(Milliseconds(5)) == "5ms"


def test_duration_is_duration_like():
    assert isinstance(Duration.seconds(1), DurationLike)
