import logging
from datetime import datetime, timezone
from itertools import count
from typing import Callable, Dict, List, Optional, Protocol

from app.models.user import User
from app.models.activity import Activity
from app.models.progress import Progress, newest_first
from app.models.learning_skill import LearningSkill
from app.schemas.user import UserCreate
from app.schemas.activity import ActivityCreate
from app.schemas.progress import ProgressCreate
from app.schemas.learning_skill import LearningSkillCreate

log = logging.getLogger("storage")


class Storage(Protocol):
    """
    Contrato de almacenamiento usado por los routers.
    La ausencia se comunica con None / lista vacía, nunca con excepción.
    """

    def get_user(self, user_id: int) -> Optional[User]: ...
    def get_user_by_username(self, username: str) -> Optional[User]: ...
    def create_user(self, data: UserCreate) -> User: ...
    def link_child(self, parent_id: int, child_id: int) -> None: ...
    def get_children_by_parent_id(self, parent_id: int) -> List[User]: ...

    def get_progress_by_user_id(self, user_id: int) -> List[Progress]: ...
    def save_progress(self, data: ProgressCreate) -> Progress: ...

    def get_activities(self, category: Optional[str] = None) -> List[Activity]: ...
    def get_activity_by_id(self, activity_id: str) -> Optional[Activity]: ...
    def create_activity(self, data: ActivityCreate) -> Activity: ...

    def get_skills_by_user_id(self, user_id: int) -> List[LearningSkill]: ...
    def save_skill(self, data: LearningSkillCreate) -> LearningSkill: ...


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)

def _or(value, default):
    return default if value is None else value


class MemStorage:
    """
    Almacenamiento en memoria del proceso: un dict por entidad, ids autoincrementales.
    Se construye vacío; el seed es un paso explícito (ver app.db.seed).
    Sin locks: se asume un único hilo escritor (el event loop).
    """

    def __init__(self, clock: Callable[[], datetime] | None = None):
        self.clock = clock or _utcnow
        self._users: Dict[int, User] = {}
        self._progress: Dict[int, Progress] = {}
        self._activities: Dict[int, Activity] = {}
        self._skills: Dict[int, LearningSkill] = {}
        # relación padre -> hijos, en orden de enlace
        self._children: Dict[int, List[int]] = {}
        self._user_ids = count(1)
        self._progress_ids = count(1)
        self._activity_ids = count(1)
        self._skill_ids = count(1)

    # ---- Users ----

    def get_user(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._users.values() if u.username == username), None)

    def create_user(self, data: UserCreate) -> User:
        # sin chequeo de username duplicado
        user = User(
            id=next(self._user_ids),
            username=data.username,
            password=data.password,
            is_parent=_or(data.is_parent, False),
            child_id=data.child_id,
            display_name=data.display_name,
            age=data.age,
            created_at=self.clock(),
        )
        self._users[user.id] = user

        if user.child_id is not None:
            if user.is_parent:
                self.link_child(user.id, user.child_id)
            else:
                # codificación inversa: el hijo apunta a su padre
                self.link_child(user.child_id, user.id)

        log.debug("user %s created (username=%s, parent=%s)", user.id, user.username, user.is_parent)
        return user

    def link_child(self, parent_id: int, child_id: int) -> None:
        children = self._children.setdefault(parent_id, [])
        if child_id not in children:
            children.append(child_id)

    def get_children_by_parent_id(self, parent_id: int) -> List[User]:
        parent = self._users.get(parent_id)
        if parent is None or not parent.is_parent:
            return []
        # el child_id propio del padre tiene prioridad; los enlaces inversos solo sin él
        if parent.child_id:
            child = self._users.get(parent.child_id)
            return [child] if child else []
        return [self._users[cid] for cid in self._children.get(parent_id, []) if cid in self._users]

    # ---- Progress ----

    def get_progress_by_user_id(self, user_id: int) -> List[Progress]:
        return newest_first(p for p in self._progress.values() if p.user_id == user_id)

    def save_progress(self, data: ProgressCreate) -> Progress:
        # siempre inserta: no se fusiona con filas previas de la misma actividad
        now = self.clock()
        progress = Progress(
            id=next(self._progress_ids),
            user_id=data.user_id,
            activity_category=data.activity_category,
            activity_id=data.activity_id,
            activity_name=data.activity_name,
            completed=_or(data.completed, False),
            score=data.score,
            time_spent=data.time_spent,
            attempts=_or(data.attempts, 1),
            correct_answers=_or(data.correct_answers, 0),
            total_questions=_or(data.total_questions, 0),
            created_at=now,
            updated_at=now,
        )
        self._progress[progress.id] = progress
        log.debug("progress %s saved (user=%s, activity=%s)", progress.id, progress.user_id, progress.activity_id)
        return progress

    # ---- Activities ----

    def get_activities(self, category: Optional[str] = None) -> List[Activity]:
        activities = list(self._activities.values())
        if category:
            activities = [a for a in activities if a.category == category]
        return activities

    def get_activity_by_id(self, activity_id: str) -> Optional[Activity]:
        return next((a for a in self._activities.values() if a.activity_id == activity_id), None)

    def create_activity(self, data: ActivityCreate) -> Activity:
        now = self.clock()
        activity = Activity(
            id=next(self._activity_ids),
            activity_id=data.activity_id,
            category=data.category,
            title=data.title,
            description=data.description,
            content=data.content,
            difficulty=_or(data.difficulty, 1),
            age_range=data.age_range,
            thumbnail_url=data.thumbnail_url,
            duration_minutes=data.duration_minutes,
            created_at=now,
            updated_at=now,
        )
        self._activities[activity.id] = activity
        log.debug("activity %s created (%s)", activity.id, activity.activity_id)
        return activity

    # ---- Learning skills ----

    def get_skills_by_user_id(self, user_id: int) -> List[LearningSkill]:
        return [s for s in self._skills.values() if s.user_id == user_id]

    def save_skill(self, data: LearningSkillCreate) -> LearningSkill:
        skill = LearningSkill(
            id=next(self._skill_ids),
            user_id=data.user_id,
            skill_name=data.skill_name,
            category=data.category,
            mastery_level=_or(data.mastery_level, 0),
            last_practiced=data.last_practiced,
            updated_at=self.clock(),
        )
        self._skills[skill.id] = skill
        log.debug("skill %s saved (user=%s, %s=%s)", skill.id, skill.user_id, skill.skill_name, skill.mastery_level)
        return skill
