"""Parking fee value objects."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class NegativeDurationError(ValueError):
    """The reference instant lies before the entry instant."""


class InvalidTimestampError(ValueError):
    """A timestamp could not be parsed into an instant."""


class UnknownPolicyError(ValueError):
    """No fee policy is configured under the requested name."""


@dataclass(frozen=True)
class FeeConfig:
    """Billing policy: a free period followed by a flat hourly rate."""

    free_period_hours: float
    rate_per_hour: float

    def __post_init__(self) -> None:
        if self.free_period_hours < 0:
            raise ValueError("free_period_hours must be non-negative")
        if self.rate_per_hour <= 0:
            raise ValueError("rate_per_hour must be positive")

    @classmethod
    def from_minutes(cls, free_period_minutes: float, rate_per_hour: float) -> "FeeConfig":
        return cls(free_period_hours=free_period_minutes / 60, rate_per_hour=rate_per_hour)


@dataclass(frozen=True)
class FeeBreakdown:
    hours: float
    fee: float
    free_hour: bool
    billable_hours: Optional[int] = None

    @property
    def requires_payment(self) -> bool:
        # a zero fee never prompts for payment
        return self.fee > 0
