from typing import Optional
from app.models.base import CamelModel

class ActivityCreate(CamelModel):
    activity_id: str
    category: str
    title: str
    description: Optional[str] = None
    content: str
    difficulty: Optional[int] = None
    age_range: Optional[str] = None
    thumbnail_url: Optional[str] = None
    duration_minutes: Optional[int] = None
