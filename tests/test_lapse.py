"""Tests for time lapse builders and decomposition."""

from tzalgebra.lapse import (
    LapseView,
    TimeLapse,
    hours,
    milliseconds,
    minutes,
    seconds,
    to_milliseconds,
    view,
)


def test_builders_compose_with_addition():
    """Test that unit builders add up to the expected millisecond count."""
    lapse = hours(1) + minutes(30) + seconds(5) + milliseconds(7)
    assert to_milliseconds(lapse) == 5_405_007


def test_view_inverts_builders():
    lapse = hours(26) + minutes(59) + seconds(59) + milliseconds(999)
    assert view(lapse) == LapseView(hours=26, minutes=59, seconds=59, milliseconds=999)


def test_view_of_negative_lapse_uses_floor_division():
    """Test that lower units stay non-negative for negative lapses."""
    assert view(milliseconds(-1)) == LapseView(
        hours=-1, minutes=59, seconds=59, milliseconds=999
    )


def test_lapses_are_ordered_values():
    assert minutes(90) == hours(1) + minutes(30)
    assert seconds(59) < minutes(1)
    assert TimeLapse(milliseconds=0) == milliseconds(0)


def test_str_shows_units():
    assert str(hours(2) + milliseconds(5)) == "TimeLapse(2h00m00.005s)"
