"""Breaker classification endpoints."""

from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from src.power_records import LVBreaker
from src.protection_checks import is_adjustable

router = APIRouter()


class AdjustabilityRequest(BaseModel):
    """Request body for trip unit classification."""

    breakers: list[LVBreaker] = Field(
        ...,
        min_length=1,
        description="Breakers to classify"
    )


class BreakerAdjustability(BaseModel):
    """Classification of one breaker."""

    id: Optional[str] = Field(description="Breaker name")
    adjustable: bool = Field(description="Whether the trip unit is adjustable")


class AdjustabilityResponse(BaseModel):
    """Response for trip unit classification."""

    results: list[BreakerAdjustability] = Field(description="One result per breaker, input order")
    adjustable_count: int = Field(description="Number of adjustable breakers")


@router.post("/adjustable", response_model=AdjustabilityResponse)
async def classify_adjustable(request: AdjustabilityRequest) -> AdjustabilityResponse:
    """
    Classify breakers as having adjustable or fixed trip units.

    A breaker is adjustable when its trip type names an adjustable or
    electronic unit, or when it carries trip unit settings other than a
    fixed instantaneous pickup.
    """
    results = [
        BreakerAdjustability(id=b.id, adjustable=is_adjustable(b))
        for b in request.breakers
    ]
    return AdjustabilityResponse(
        results=results,
        adjustable_count=sum(1 for r in results if r.adjustable)
    )
