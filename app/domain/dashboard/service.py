import logging
from typing import List

from app.core.content import ACTIVITY_CATEGORIES
from app.db import Storage
from app.models.user import User
from app.models.progress import Progress, newest_first
from app.models.learning_skill import LearningSkill
from app.schemas.dashboard import (
    DashboardSummary, ChildInfo, SummaryStats, CategoryProgress, SkillEntry,
)

log = logging.getLogger("dashboard")

RECENT_LIMIT = 5

class ChildNotFound(Exception): ...


def _category_progress(progress: List[Progress], category: str) -> CategoryProgress:
    items = [p for p in progress if p.activity_category == category]
    completed = sum(1 for p in items if p.completed)
    percentage = (completed / len(items)) * 100 if items else 0
    return CategoryProgress(total=len(items), completed=completed, percentage=percentage)


def build_summary(child: User, progress: List[Progress], skills: List[LearningSkill]) -> DashboardSummary:
    """
    Reporte para el padre: totales, promedio de puntajes (solo los no nulos),
    avance por categoría, habilidades y las 5 actividades más recientes.
    """
    scores = [p.score for p in progress if p.score is not None]
    average_score = sum(scores) / len(scores) if scores else 0
    recent = newest_first(progress)[:RECENT_LIMIT]

    return DashboardSummary(
        child_info=ChildInfo(id=child.id, name=child.display_name or child.username, age=child.age),
        summary=SummaryStats(
            total_activities=len(progress),
            completed_activities=sum(1 for p in progress if p.completed),
            average_score=average_score,
            most_recent_activity=recent[0] if recent else None,
            time_spent=sum(p.time_spent or 0 for p in progress),
        ),
        category_progress={c: _category_progress(progress, c) for c in ACTIVITY_CATEGORIES},
        skills=[
            SkillEntry(
                name=s.skill_name,
                category=s.category,
                mastery=s.mastery_level,
                last_practiced=s.last_practiced,
            )
            for s in skills
        ],
        recent_activities=recent,
    )


def get_dashboard_summary(storage: Storage, child_id: int) -> DashboardSummary:
    child = storage.get_user(child_id)
    if child is None:
        raise ChildNotFound(child_id)

    # dos lecturas independientes, sin snapshot
    progress = storage.get_progress_by_user_id(child_id)
    skills = storage.get_skills_by_user_id(child_id)
    log.debug("dashboard child=%s progress=%s skills=%s", child_id, len(progress), len(skills))
    return build_summary(child, progress, skills)
