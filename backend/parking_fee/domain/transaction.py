"""Parking transaction as reported by the transaction backend."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class ParkingTransaction:
    id: int
    license_plate: str
    entry_time: str
    building: str = ""
    building_id: Optional[int] = None
    image_path: Optional[str] = None
    exit_time: Optional[str] = None
    qr_token: str = ""
    status: str = "ACTIVE"
    fee: Optional[float] = None

    @property
    def is_paid(self) -> bool:
        return (self.status or "").upper() == "PAID"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParkingTransaction":
        """Build from a backend JSON record, ignoring unknown keys."""
        fields = cls.__dataclass_fields__
        return cls(**{key: value for key, value in data.items() if key in fields})
