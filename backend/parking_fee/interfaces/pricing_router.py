"""Routers for fee quotes shown on the receipt and transaction pages."""
from __future__ import annotations

from typing import Any, Dict, List, NoReturn, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from parking_fee.application.pricing_service import PricingService
from parking_fee.domain.fee import UnknownPolicyError
from parking_fee.domain.transaction import ParkingTransaction
from parking_fee.interfaces import deps

router = APIRouter(tags=["pricing"])


class QuoteRequest(BaseModel):
    entryTime: str = Field(..., description="Entry time, ISO-8601")
    referenceTime: Optional[str] = Field(default=None, description="Defaults to the current time")
    policy: Optional[str] = Field(default=None, description="Fee policy name, defaults to config")


class DurationRequest(BaseModel):
    hours: float = Field(..., ge=0.0, description="Elapsed time in hours")


class TransactionQuoteRequest(BaseModel):
    """Transaction record in the shape the transaction backend returns it."""

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
    policy: Optional[str] = Field(default=None, description="Fee policy name, defaults to config")


def _raise_http(exc: ValueError) -> NoReturn:
    if isinstance(exc, UnknownPolicyError):
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.get("/fees/policies")
def list_policies(service: PricingService = Depends(deps.get_pricing_service)) -> Dict[str, List[Dict[str, Any]]]:
    return {"policies": service.list_policies()}


@router.post("/fees/quote")
def quote_fee(
    payload: QuoteRequest, service: PricingService = Depends(deps.get_pricing_service)
) -> Dict[str, Any]:
    """
    Quote the fee for a stay that started at ``entryTime``.
    """
    try:
        return service.quote(payload.entryTime, payload.referenceTime, payload.policy)
    except ValueError as exc:
        _raise_http(exc)


@router.post("/fees/duration")
def describe_duration(
    payload: DurationRequest, service: PricingService = Depends(deps.get_pricing_service)
) -> Dict[str, Any]:
    return {"hours": payload.hours, "duration": service.describe_duration(payload.hours)}


@router.post("/transactions/quote")
def quote_transaction(
    payload: TransactionQuoteRequest, service: PricingService = Depends(deps.get_pricing_service)
) -> Dict[str, Any]:
    """
    Quote a transaction record; closed ones are priced up to their exit time.
    """
    record = payload.dict(exclude={"policy"})
    try:
        return service.quote_transaction(ParkingTransaction.from_dict(record), payload.policy)
    except ValueError as exc:
        _raise_http(exc)
