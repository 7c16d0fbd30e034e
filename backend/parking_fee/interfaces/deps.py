"""Shared singletons for settings and the pricing service.

Settings come from app_config.yaml, or from the file named by
PARKING_FEE_CONFIG.
"""
from __future__ import annotations

from parking_fee.app.config import AppConfig, get_settings
from parking_fee.application.pricing_service import PricingService

settings = get_settings()

pricing_service = PricingService(settings)

print(f"[deps] Config version: {settings.version}")
print(f"[deps] Fee policies: {', '.join(pricing_service.policies)} (default: {pricing_service.default_policy})")


def get_pricing_service() -> PricingService:
    return pricing_service


def apply_settings(new_settings: AppConfig) -> None:
    """Update global settings reference and refresh dependent singletons."""
    global settings
    settings = new_settings
    pricing_service.update_config(new_settings)


def reload_settings_from_disk() -> AppConfig:
    """Force re-read of the configuration file and propagate changes."""
    get_settings.cache_clear()
    fresh = get_settings()
    apply_settings(fresh)
    return fresh
