from typing import Optional, Union
from app.models.base import CamelModel

class ProgressCreate(CamelModel):
    user_id: Optional[int] = None
    activity_category: str
    activity_id: str
    activity_name: Optional[str] = None
    completed: Optional[bool] = None
    score: Optional[Union[int, float]] = None
    time_spent: Optional[int] = None
    attempts: Optional[int] = None
    correct_answers: Optional[int] = None
    total_questions: Optional[int] = None
