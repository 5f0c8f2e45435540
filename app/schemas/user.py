from pydantic import ConfigDict
from typing import Optional
from datetime import datetime
from app.models.base import CamelModel

class UserCreate(CamelModel):
    username: str
    password: str
    is_parent: Optional[bool] = None
    child_id: Optional[int] = None
    display_name: Optional[str] = None
    age: Optional[int] = None

class UserOut(CamelModel):
    # sin password: nunca sale en una respuesta
    id: int
    username: str
    is_parent: bool
    child_id: Optional[int] = None
    display_name: Optional[str] = None
    age: Optional[int] = None
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)
