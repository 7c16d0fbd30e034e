"""Shared fixtures: inline settings and a fixed clock."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from parking_fee.app.config import load_config
from parking_fee.application.pricing_service import PricingService

# 14:30:15 in Bangkok
ENTRY = datetime(2025, 1, 5, 7, 30, 15, tzinfo=timezone.utc)
NOW = ENTRY + timedelta(minutes=90)

TEST_CONFIG = """
version: test
pricing:
  default_policy: transaction
  policies:
    receipt:
      free_period_minutes: 60
      rate_per_hour: 20
    transaction:
      free_period_minutes: 1
      rate_per_hour: 20
display:
  timezone: Asia/Bangkok
  currency_symbol: "฿"
  hour_label: hr
  minute_label: min
server:
  cors_origins:
    - http://localhost:3000
"""


@pytest.fixture
def settings():
    return load_config(TEST_CONFIG)


@pytest.fixture
def service(settings):
    return PricingService(settings, clock=lambda: NOW)
