from datetime import datetime
from typing import Optional
from app.models.base import CamelModel

class Activity(CamelModel):
    id: int
    activity_id: str                     # clave de negocio, distinta del id interno
    category: str
    title: str
    description: Optional[str] = None
    content: str                         # blob serializado, no se interpreta
    difficulty: int = 1
    age_range: Optional[str] = None
    thumbnail_url: Optional[str] = None
    duration_minutes: Optional[int] = None
    created_at: datetime
    updated_at: datetime
