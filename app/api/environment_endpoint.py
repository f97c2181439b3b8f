"""
GET /v1/environment?city=Delhi

Live AQI / temperature / humidity for a supported city, degrading to the
static estimate. Unknown cities are rejected here (the orchestrator itself
accepts them and uses the default estimate).
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.dependencies import get_environment_service
from app.core.auth import current_user_id
from app.schemas.profile import EnvironmentalReading
from app.services.environment import EnvironmentService, is_known_city

router = APIRouter(prefix="/v1/environment", tags=["environment"])


@router.get("", response_model=EnvironmentalReading)
async def get_environment(
    city: str = Query(..., min_length=1),
    _user_id: str = Depends(current_user_id),
    service: EnvironmentService = Depends(get_environment_service),
) -> EnvironmentalReading:
    if not is_known_city(city):
        raise HTTPException(status_code=400, detail="Invalid city")
    return await service.lookup(city)
