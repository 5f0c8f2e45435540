from datetime import datetime
from typing import Optional
from app.models.base import CamelModel

class LearningSkill(CamelModel):
    id: int
    user_id: int
    skill_name: str
    category: str
    mastery_level: int = 0               # 0..100 por convención
    last_practiced: Optional[datetime] = None
    updated_at: datetime
