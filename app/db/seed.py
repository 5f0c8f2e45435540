import json
import logging
from datetime import timedelta

from app.db.storage import MemStorage
from app.models.user import User
from app.schemas.user import UserCreate
from app.schemas.activity import ActivityCreate
from app.schemas.progress import ProgressCreate
from app.schemas.learning_skill import LearningSkillCreate

log = logging.getLogger("storage")

ACTIVITY_SEEDS = [
    # activity_id,          category,   title,               description,                                   content,                                                                   thumbnail,                minutes
    ("alphabet-tracing",  "alphabet", "Alphabet Tracing",  "Learn to write letters with gesture tracing", {"type": "tracing", "letters": ["A", "B", "C", "D", "E"]},                "/images/alphabet.svg", 5),
    ("number-counting",   "numbers",  "Number Counting",   "Count objects and learn numbers 1-5",         {"type": "counting", "numbers": [1, 2, 3, 4, 5]},                         "/images/numbers.svg",  5),
    ("shape-matching",    "shapes",   "Shape Matching",    "Identify and match common shapes",            {"type": "matching", "shapes": ["circle", "square", "triangle", "rectangle", "star"]}, "/images/shapes.svg", 4),
    ("color-recognition", "colors",   "Color Recognition", "Learn to identify basic colors",              {"type": "recognition", "colors": ["red", "blue", "green", "yellow", "purple"]}, "/images/colors.svg", 4),
    ("animal-sounds",     "animals",  "Animal Sounds",     "Match animals with their sounds",             {"type": "sounds", "animals": ["cat", "dog", "cow", "sheep", "horse"]},   "/images/animals.svg",  6),
]

PROGRESS_SEEDS = [
    # category,  activity_id,         name,                completed, score, time_spent, attempts, correct, total
    ("alphabet", "alphabet-tracing",  "Alphabet Tracing",  True,      85,    240,        2,        4,       5),
    ("numbers",  "number-counting",   "Number Counting",   True,      90,    180,        1,        9,       10),
    ("shapes",   "shape-matching",    "Shape Matching",    True,      75,    300,        2,        6,       8),
    ("colors",   "color-recognition", "Color Recognition", False,     60,    150,        1,        3,       5),
]

SKILL_SEEDS = [
    # skill_name,             category,   mastery, days_ago
    ("letter_recognition",   "alphabet", 85,      1),
    ("number_counting",      "numbers",  75,      2),
    ("shape_identification", "shapes",   90,      1),
    ("color_matching",       "colors",   65,      3),
    ("animal_sounds",        "animals",  50,      4),
]


def seed_sample_data(storage: MemStorage) -> tuple[User, User]:
    """
    Carga los datos de ejemplo de forma síncrona. Devuelve (child, parent).
    El hijo se crea primero para que el padre pueda enlazarlo por id.
    """
    child = storage.create_user(UserCreate(
        username="child", password="password123", is_parent=False,
        display_name="Child One", age=4,
    ))
    parent = storage.create_user(UserCreate(
        username="parent", password="password123", is_parent=True,
        child_id=child.id, display_name="Parent User", age=35,
    ))

    for activity_id, category, title, desc, content, thumb, minutes in ACTIVITY_SEEDS:
        storage.create_activity(ActivityCreate(
            activity_id=activity_id,
            category=category,
            title=title,
            description=desc,
            content=json.dumps(content),
            difficulty=1,
            age_range="3-5",
            thumbnail_url=thumb,
            duration_minutes=minutes,
        ))

    for category, activity_id, name, completed, score, spent, attempts, correct, total in PROGRESS_SEEDS:
        storage.save_progress(ProgressCreate(
            user_id=child.id,
            activity_category=category,
            activity_id=activity_id,
            activity_name=name,
            completed=completed,
            score=score,
            time_spent=spent,
            attempts=attempts,
            correct_answers=correct,
            total_questions=total,
        ))

    now = storage.clock()
    for skill_name, category, mastery, days_ago in SKILL_SEEDS:
        storage.save_skill(LearningSkillCreate(
            user_id=child.id,
            skill_name=skill_name,
            category=category,
            mastery_level=mastery,
            last_practiced=now - timedelta(days=days_ago),
        ))

    log.info("sample data seeded (child=%s, parent=%s)", child.id, parent.id)
    return child, parent
