from datetime import datetime
from typing import Iterable, Optional, Union
from app.models.base import CamelModel

class Progress(CamelModel):
    id: int
    user_id: Optional[int] = None
    activity_category: str
    activity_id: str                     # Activity.activity_id, sin verificar
    activity_name: Optional[str] = None
    completed: bool = False
    score: Optional[Union[int, float]] = None    # se conserva tal cual llega (85 o 85.5)
    time_spent: Optional[int] = None     # segundos
    attempts: int = 1
    correct_answers: int = 0
    total_questions: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


def _updated_ts(p: Progress) -> float:
    return p.updated_at.timestamp() if p.updated_at else 0

def newest_first(rows: Iterable[Progress]) -> list[Progress]:
    """Ordena por updated_at DESC. Estable: empates conservan el orden de inserción; sin fecha = época 0."""
    return sorted(rows, key=_updated_ts, reverse=True)
