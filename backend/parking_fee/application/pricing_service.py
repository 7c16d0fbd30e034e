"""Pricing service: resolves fee policies and builds quotes for the dashboard."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Union

from parking_fee.app.config import AppConfig
from parking_fee.application.fee_calculator import compute_fee, format_duration
from parking_fee.application.time_format import (
    DEFAULT_TIMEZONE,
    format_fee,
    format_short_time,
    format_time,
    get_zone,
    parse_timestamp,
)
from parking_fee.domain.fee import FeeBreakdown, FeeConfig, UnknownPolicyError
from parking_fee.domain.transaction import ParkingTransaction

Clock = Callable[[], datetime]
Timestamp = Union[str, datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PricingService:
    def __init__(self, config: AppConfig, clock: Optional[Clock] = None):
        self.config = config
        self.clock = clock or utc_now
        self._apply_pricing_config()

    def _apply_pricing_config(self) -> None:
        pricing_cfg = self.config.pricing or {}
        policies: Dict[str, FeeConfig] = {}
        for name, policy_cfg in (pricing_cfg.get("policies") or {}).items():
            policy_cfg = policy_cfg or {}
            policies[str(name)] = FeeConfig.from_minutes(
                float(policy_cfg.get("free_period_minutes", 60)),
                float(policy_cfg.get("rate_per_hour", 20)),
            )
        if not policies:
            policies["default"] = FeeConfig.from_minutes(60, 20)
        default_policy = str(pricing_cfg.get("default_policy") or next(iter(policies)))
        if default_policy not in policies:
            raise ValueError(f"Default fee policy '{default_policy}' is not configured")
        self.policies = policies
        self.default_policy = default_policy

        display_cfg = self.config.display or {}
        self.timezone = str(display_cfg.get("timezone", DEFAULT_TIMEZONE))
        get_zone(self.timezone)
        self.currency_symbol = str(display_cfg.get("currency_symbol", "฿"))
        self.hour_label = str(display_cfg.get("hour_label", "hr"))
        self.minute_label = str(display_cfg.get("minute_label", "min"))

    def update_config(self, config: AppConfig) -> None:
        self.config = config
        self._apply_pricing_config()

    # Policies -------------------------------------------------------------
    def resolve_policy(self, name: Optional[str] = None) -> FeeConfig:
        policy_name = name or self.default_policy
        try:
            return self.policies[policy_name]
        except KeyError:
            raise UnknownPolicyError(f"Fee policy '{policy_name}' not found") from None

    def list_policies(self) -> List[Dict[str, Any]]:
        return [
            {
                "name": name,
                "freePeriodHours": policy.free_period_hours,
                "freePeriodMinutes": round(policy.free_period_hours * 60, 6),
                "ratePerHour": policy.rate_per_hour,
                "isDefault": name == self.default_policy,
            }
            for name, policy in self.policies.items()
        ]

    # Quotes ---------------------------------------------------------------
    def quote(
        self,
        entry_time: Timestamp,
        reference_time: Optional[Timestamp] = None,
        policy: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Price a stay from ``entry_time`` up to ``reference_time`` (default: now)."""
        policy_name = policy or self.default_policy
        fee_config = self.resolve_policy(policy_name)
        entry = parse_timestamp(entry_time)
        reference = parse_timestamp(reference_time if reference_time is not None else self.clock())
        breakdown = compute_fee(entry, reference, fee_config)
        return self._serialize_quote(breakdown, entry, reference, policy_name, fee_config)

    def quote_transaction(
        self, transaction: ParkingTransaction, policy: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Price a backend transaction.

        A closed transaction is priced up to its exit time. A paid one never
        asks for payment again and keeps the fee the backend recorded.
        """
        quote = self.quote(transaction.entry_time, transaction.exit_time, policy)
        if transaction.is_paid:
            if transaction.fee is not None:
                quote["fee"] = transaction.fee
                quote["feeText"] = format_fee(transaction.fee, self.currency_symbol)
            quote["paymentRequired"] = False
        quote.update(
            {
                "transactionId": transaction.id,
                "licensePlate": transaction.license_plate,
                "building": transaction.building,
                "status": transaction.status,
                "isPaid": transaction.is_paid,
            }
        )
        return quote

    def describe_duration(self, hours: float) -> str:
        return format_duration(hours, self.hour_label, self.minute_label)

    # Helpers --------------------------------------------------------------
    def _serialize_quote(
        self,
        breakdown: FeeBreakdown,
        entry: datetime,
        reference: datetime,
        policy_name: str,
        fee_config: FeeConfig,
    ) -> Dict[str, Any]:
        return {
            "policy": policy_name,
            "freePeriodHours": fee_config.free_period_hours,
            "ratePerHour": fee_config.rate_per_hour,
            "hours": breakdown.hours,
            "billableHours": breakdown.billable_hours,
            "fee": breakdown.fee,
            "freeHour": breakdown.free_hour,
            "paymentRequired": breakdown.requires_payment,
            "duration": self.describe_duration(breakdown.hours),
            "feeText": format_fee(breakdown.fee, self.currency_symbol),
            "entryTime": entry.isoformat(),
            "referenceTime": reference.isoformat(),
            "entryTimeDisplay": format_time(entry, self.timezone),
            "entryTimeShort": format_short_time(entry, self.timezone),
            "referenceTimeDisplay": format_time(reference, self.timezone),
            "referenceTimeShort": format_short_time(reference, self.timezone),
        }
