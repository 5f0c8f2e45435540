import logging
from typing import Any
from fastapi import APIRouter, Body, Depends, HTTPException, status
from app.deps import get_storage
from app.db import Storage
from app.models.progress import Progress
from app.schemas.progress import ProgressCreate

log = logging.getLogger("progress")

router = APIRouter(prefix="/progress", tags=["progress"])

@router.get("/{user_id}", response_model=list[Progress])
async def list_progress(user_id: int, storage: Storage = Depends(get_storage)):
    try:
        return storage.get_progress_by_user_id(user_id)
    except Exception:
        log.exception("Error getting progress of user %s", user_id)
        raise HTTPException(status_code=500, detail="Server error")

@router.post("", response_model=Progress, status_code=status.HTTP_201_CREATED)
async def save_progress(body: Any = Body(None), storage: Storage = Depends(get_storage)):
    try:
        payload = ProgressCreate.model_validate(body)
        return storage.save_progress(payload)
    except Exception as e:
        log.warning("Error saving progress: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid progress data")
