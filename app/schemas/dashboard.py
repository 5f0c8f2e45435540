from datetime import datetime
from typing import Optional, Dict, List
from app.models.base import CamelModel
from app.models.progress import Progress

class ChildInfo(CamelModel):
    id: int
    name: str
    age: Optional[int] = None

class SummaryStats(CamelModel):
    total_activities: int
    completed_activities: int
    average_score: float
    most_recent_activity: Optional[Progress] = None
    time_spent: int                      # segundos

class CategoryProgress(CamelModel):
    total: int
    completed: int
    percentage: float

class SkillEntry(CamelModel):
    name: str
    category: str
    mastery: int
    last_practiced: Optional[datetime] = None

class DashboardSummary(CamelModel):
    child_info: ChildInfo
    summary: SummaryStats
    category_progress: Dict[str, CategoryProgress]
    skills: List[SkillEntry]
    recent_activities: List[Progress]
