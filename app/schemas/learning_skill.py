from datetime import datetime
from typing import Optional
from app.models.base import CamelModel

class LearningSkillCreate(CamelModel):
    user_id: int
    skill_name: str
    category: str
    mastery_level: Optional[int] = None
    last_practiced: Optional[datetime] = None
