"""Fee rules: free period boundary, ceiling billing, duration text."""
from __future__ import annotations

from datetime import timedelta

import pytest

from parking_fee.application.fee_calculator import compute_fee, format_duration, split_hours
from parking_fee.domain.fee import FeeConfig, NegativeDurationError

from conftest import ENTRY

ONE_HOUR_FREE = FeeConfig(free_period_hours=1, rate_per_hour=20)
ONE_MINUTE_FREE = FeeConfig.from_minutes(1, 20)


@pytest.mark.parametrize(
    "config, free_period",
    [(ONE_HOUR_FREE, timedelta(hours=1)), (ONE_MINUTE_FREE, timedelta(minutes=1))],
)
def test_stay_ending_on_free_boundary_is_free(config, free_period):
    result = compute_fee(ENTRY, ENTRY + free_period, config)

    assert result.fee == 0
    assert result.free_hour is True
    assert result.billable_hours is None
    assert result.requires_payment is False


@pytest.mark.parametrize(
    "config, free_period",
    [(ONE_HOUR_FREE, timedelta(hours=1)), (ONE_MINUTE_FREE, timedelta(minutes=1))],
)
def test_one_millisecond_past_free_period_bills_a_full_hour(config, free_period):
    result = compute_fee(ENTRY, ENTRY + free_period + timedelta(milliseconds=1), config)

    assert result.billable_hours == 1
    assert result.fee == 20
    assert result.free_hour is False
    assert result.requires_payment is True


def test_partial_hours_round_up():
    assert compute_fee(ENTRY, ENTRY + timedelta(hours=1.5), ONE_HOUR_FREE).fee == 20

    result = compute_fee(ENTRY, ENTRY + timedelta(hours=2.01), ONE_HOUR_FREE)
    assert result.billable_hours == 2
    assert result.fee == 40


def test_hours_is_raw_elapsed_time():
    result = compute_fee(ENTRY, ENTRY + timedelta(minutes=150), ONE_HOUR_FREE)

    assert result.hours == pytest.approx(2.5)
    assert result.billable_hours == 2
    assert result.fee == 40


def test_zero_elapsed_is_free():
    result = compute_fee(ENTRY, ENTRY, ONE_HOUR_FREE)

    assert result.hours == 0
    assert result.fee == 0
    assert result.free_hour is True


def test_fee_never_decreases_as_time_passes():
    fees = [
        compute_fee(ENTRY, ENTRY + timedelta(minutes=minutes), ONE_MINUTE_FREE).fee
        for minutes in range(0, 600, 7)
    ]
    assert fees == sorted(fees)
    assert all(fee % 20 == 0 for fee in fees)


def test_repeated_calls_are_identical():
    reference = ENTRY + timedelta(hours=3, minutes=7)
    assert compute_fee(ENTRY, reference, ONE_HOUR_FREE) == compute_fee(ENTRY, reference, ONE_HOUR_FREE)


def test_reference_before_entry_is_rejected():
    with pytest.raises(NegativeDurationError):
        compute_fee(ENTRY, ENTRY - timedelta(seconds=1), ONE_HOUR_FREE)


def test_negative_duration_error_is_a_value_error():
    assert issubclass(NegativeDurationError, ValueError)


@pytest.mark.parametrize(
    "kwargs",
    [{"free_period_hours": -1, "rate_per_hour": 20}, {"free_period_hours": 1, "rate_per_hour": 0}],
)
def test_fee_config_rejects_invalid_policy(kwargs):
    with pytest.raises(ValueError):
        FeeConfig(**kwargs)


@pytest.mark.parametrize(
    "hours, expected",
    [
        (0, "0 min"),
        (0.5, "30 min"),
        (1, "1 hr"),
        (1.5, "1 hr 30 min"),
        (1.25, "1 hr 15 min"),
        (0.9999, "1 hr"),
        (2.9999, "3 hr"),
    ],
)
def test_format_duration(hours, expected):
    assert format_duration(hours) == expected


def test_format_duration_never_shows_sixty_minutes():
    for step in range(0, 5000):
        hours = step / 997
        assert "60 min" not in format_duration(hours)


def test_format_duration_uses_given_labels():
    assert format_duration(1.5, "ชม.", "นาที") == "1 ชม. 30 นาที"


def test_split_hours_carries_rounded_minutes():
    assert split_hours(0.9999) == (1, 0)
    assert split_hours(2.25) == (2, 15)


def test_format_duration_rejects_negative_hours():
    with pytest.raises(ValueError):
        format_duration(-0.1)
