from typing import Any, Dict
from fastapi import APIRouter, Depends, HTTPException
from ..models.schemas import HealthResponse
from ..services.container import get_health_service
from ..services.health_service import HealthService

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def index_health(service: HealthService = Depends(get_health_service)):
    """
    Whether the content index answers, and how many context nodes
    already have a cached suggestion template.

    `status` is DEGRADED when the content index is missing; suggestions
    then come back with `errors` instead of results.
    """
    try:
        return await service.get_health_status()
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Index health error: {str(e)}")


@router.get("/health/detailed", response_model=Dict[str, Any])
async def suggest_configuration_status(service: HealthService = Depends(get_health_service)):
    """Index statistics plus the fields, workspace and bucket count used to build suggestion templates"""
    try:
        return await service.get_detailed_status()
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Suggest status error: {str(e)}")
