from datetime import datetime
from typing import Optional
from app.models.base import CamelModel

class User(CamelModel):
    id: int
    username: str
    password: str
    is_parent: bool = False
    child_id: Optional[int] = None       # padre -> su hijo (legacy: hijo -> su padre)
    display_name: Optional[str] = None
    age: Optional[int] = None
    created_at: datetime
