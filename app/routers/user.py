import logging
from typing import Any
from fastapi import APIRouter, Body, Depends, HTTPException, status
from app.deps import get_storage
from app.db import Storage
from app.schemas.user import UserCreate, UserOut

log = logging.getLogger("users")

router = APIRouter(prefix="/users", tags=["users"])

@router.get("/{user_id}", response_model=UserOut)
async def read_user(user_id: int, storage: Storage = Depends(get_storage)):
    try:
        user = storage.get_user(user_id)
    except Exception:
        log.exception("Error getting user %s", user_id)
        raise HTTPException(status_code=500, detail="Server error")
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user

@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def create_user(body: Any = Body(None), storage: Storage = Depends(get_storage)):
    try:
        payload = UserCreate.model_validate(body)
        return storage.create_user(payload)
    except Exception as e:
        log.warning("Error creating user: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid user data")

@router.get("/{user_id}/children", response_model=list[UserOut])
async def list_children(user_id: int, storage: Storage = Depends(get_storage)):
    try:
        return storage.get_children_by_parent_id(user_id)
    except Exception:
        log.exception("Error getting children of %s", user_id)
        raise HTTPException(status_code=500, detail="Server error")
