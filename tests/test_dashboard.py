from datetime import datetime, timedelta, timezone

import pytest

from app.domain.dashboard.service import ChildNotFound, build_summary, get_dashboard_summary
from app.models.progress import Progress
from app.schemas.user import UserCreate
from app.schemas.progress import ProgressCreate
from app.schemas.learning_skill import LearningSkillCreate

T0 = datetime(2024, 3, 1, tzinfo=timezone.utc)


def _row(id, category="alphabet", completed=False, score=None, time_spent=None, updated_at=None):
    return Progress(
        id=id, user_id=1, activity_category=category, activity_id=f"{category}-{id}",
        completed=completed, score=score, time_spent=time_spent, updated_at=updated_at,
    )


@pytest.fixture
def child(storage):
    return storage.create_user(UserCreate(username="kid", password="p", age=5))


def test_missing_child_raises(storage):
    with pytest.raises(ChildNotFound):
        get_dashboard_summary(storage, 123)


def test_average_uses_only_scored_rows(storage, child):
    for score in (85, 90, 75, 60, None):
        storage.save_progress(ProgressCreate(user_id=child.id, activity_category="numbers", activity_id="n", score=score))
    summary = get_dashboard_summary(storage, child.id).summary
    assert summary.total_activities == 5
    assert summary.average_score == pytest.approx(77.5)


def test_empty_child_report(storage, child):
    report = get_dashboard_summary(storage, child.id)
    assert report.child_info.name == "kid"
    assert report.child_info.age == 5
    assert report.summary.total_activities == 0
    assert report.summary.completed_activities == 0
    assert report.summary.average_score == 0
    assert report.summary.most_recent_activity is None
    assert report.summary.time_spent == 0
    assert list(report.category_progress) == ["alphabet", "numbers", "shapes", "colors", "animals"]
    for cp in report.category_progress.values():
        assert (cp.total, cp.completed, cp.percentage) == (0, 0, 0)
    assert report.skills == []
    assert report.recent_activities == []


def test_category_breakdown_and_time(child):
    progress = [
        _row(1, "shapes", completed=True, time_spent=100),
        _row(2, "shapes", completed=False, time_spent=None),
        _row(3, "shapes", completed=True, time_spent=20),
        _row(4, "music", completed=True, time_spent=5),
    ]
    report = build_summary(child, progress, [])
    shapes = report.category_progress["shapes"]
    assert (shapes.total, shapes.completed) == (3, 2)
    assert shapes.percentage == pytest.approx(200 / 3)
    # categorías fuera del conjunto fijo cuentan en los totales pero no tienen desglose
    assert "music" not in report.category_progress
    assert report.summary.total_activities == 4
    assert report.summary.completed_activities == 3
    assert report.summary.time_spent == 125


def test_recent_activities_newest_five(child):
    progress = [_row(i, updated_at=T0 + timedelta(hours=i)) for i in range(1, 8)]
    progress.append(_row(8, updated_at=None))
    report = build_summary(child, progress, [])
    assert [p.id for p in report.recent_activities] == [7, 6, 5, 4, 3]
    assert report.summary.most_recent_activity.id == 7


def test_recent_activities_missing_dates_keep_order(child):
    progress = [_row(1), _row(2), _row(3, updated_at=T0)]
    report = build_summary(child, progress, [])
    assert [p.id for p in report.recent_activities] == [3, 1, 2]


def test_display_name_falls_back_to_username(storage):
    named = storage.create_user(UserCreate(username="kid2", password="p", display_name="Kiddo"))
    assert get_dashboard_summary(storage, named.id).child_info.name == "Kiddo"


def test_skills_mapping(storage, child):
    practiced = T0 - timedelta(days=2)
    storage.save_skill(LearningSkillCreate(user_id=child.id, skill_name="count", category="numbers",
                                           mastery_level=70, last_practiced=practiced))
    (skill,) = get_dashboard_summary(storage, child.id).skills
    assert skill.name == "count"
    assert skill.category == "numbers"
    assert skill.mastery == 70
    assert skill.last_practiced == practiced


def test_sample_data_summary(seeded_storage):
    child = seeded_storage.get_user_by_username("child")
    report = get_dashboard_summary(seeded_storage, child.id)
    assert report.summary.total_activities == 4
    assert report.summary.completed_activities == 3
    assert report.summary.average_score == pytest.approx(77.5)
    assert report.summary.time_spent == 870
    assert report.category_progress["colors"].percentage == 0
    assert report.category_progress["animals"].total == 0
    assert len(report.skills) == 5
