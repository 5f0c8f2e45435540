import logging
from typing import Any, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, status
from app.deps import get_storage
from app.db import Storage
from app.models.activity import Activity
from app.schemas.activity import ActivityCreate

log = logging.getLogger("activities")

router = APIRouter(prefix="/activities", tags=["activities"])

@router.get("", response_model=list[Activity])
async def list_activities(category: Optional[str] = None, storage: Storage = Depends(get_storage)):
    try:
        return storage.get_activities(category)
    except Exception:
        log.exception("Error getting activities (category=%s)", category)
        raise HTTPException(status_code=500, detail="Server error")

@router.get("/{activity_id}", response_model=Activity)
async def read_activity(activity_id: str, storage: Storage = Depends(get_storage)):
    """Busca por la clave de negocio (activityId), no por el id interno."""
    try:
        activity = storage.get_activity_by_id(activity_id)
    except Exception:
        log.exception("Error getting activity %s", activity_id)
        raise HTTPException(status_code=500, detail="Server error")
    if activity is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Activity not found")
    return activity

@router.post("", response_model=Activity, status_code=status.HTTP_201_CREATED)
async def create_activity(body: Any = Body(None), storage: Storage = Depends(get_storage)):
    try:
        payload = ActivityCreate.model_validate(body)
        return storage.create_activity(payload)
    except Exception as e:
        log.warning("Error creating activity: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid activity data")
