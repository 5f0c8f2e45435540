import logging
from typing import Any
from fastapi import APIRouter, Body, Depends, HTTPException, status
from app.deps import get_storage
from app.db import Storage
from app.models.learning_skill import LearningSkill
from app.schemas.learning_skill import LearningSkillCreate

log = logging.getLogger("skills")

router = APIRouter(prefix="/skills", tags=["skills"])

@router.get("/{user_id}", response_model=list[LearningSkill])
async def list_skills(user_id: int, storage: Storage = Depends(get_storage)):
    try:
        return storage.get_skills_by_user_id(user_id)
    except Exception:
        log.exception("Error getting skills of user %s", user_id)
        raise HTTPException(status_code=500, detail="Server error")

@router.post("", response_model=LearningSkill, status_code=status.HTTP_201_CREATED)
async def save_skill(body: Any = Body(None), storage: Storage = Depends(get_storage)):
    try:
        payload = LearningSkillCreate.model_validate(body)
        return storage.save_skill(payload)
    except Exception as e:
        log.warning("Error saving skill: %s", e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid skill data")
