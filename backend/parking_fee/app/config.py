"""Configuration loader that keeps all pricing constants centralized."""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

import yaml


CONFIG_PATH = Path(__file__).resolve().parent / "app_config.yaml"
CONFIG_ENV_VAR = "PARKING_FEE_CONFIG"


@dataclass(frozen=True)
class AppConfig:
    """Strongly-typed wrapper over the raw YAML document."""

    raw: Dict[str, Any]

    @property
    def version(self) -> str:
        return str(self.raw.get("version", "v1"))

    @property
    def pricing(self) -> Dict[str, Any]:
        return self.raw.get("pricing", {})

    @property
    def display(self) -> Dict[str, Any]:
        return self.raw.get("display", {})

    @property
    def server(self) -> Dict[str, Any]:
        return self.raw.get("server", {})

    @property
    def cors_origins(self) -> List[str]:
        return list((self.server or {}).get("cors_origins", []))


def load_config(text: str) -> AppConfig:
    """Parse a YAML document into an AppConfig."""
    data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ValueError("Configuration file must define a mapping at the top level.")
    return AppConfig(raw=data)


@lru_cache(maxsize=1)
def get_settings(path: Path | None = None) -> AppConfig:
    """Load configuration once per process."""

    env_path = os.environ.get(CONFIG_ENV_VAR)
    config_path = path or (Path(env_path) if env_path else CONFIG_PATH)
    return load_config(config_path.read_text(encoding="utf-8"))
