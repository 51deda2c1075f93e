from datetime import date, time
from uuid import uuid4

import pytest
from sqlalchemy import func, select

from study_tracker.core.errors import NotFoundError, ValidationError
from study_tracker.models import FocusSession, School, StudyPlan, User
from study_tracker.services.session_service import record_session


async def count_sessions(db, user_id):
    return await db.scalar(
        select(func.count()).select_from(FocusSession).where(FocusSession.user_id == user_id)
    )


async def user_points(db, user_id):
    return await db.scalar(select(User.total_points).where(User.id == user_id))


async def school_points(db, school_id):
    return await db.scalar(select(School.total_points).where(School.id == school_id))


async def plan_row(db, plan_id):
    result = await db.execute(
        select(StudyPlan.completed_minutes, StudyPlan.pomodoro_count, StudyPlan.completed)
        .where(StudyPlan.id == plan_id)
    )
    return result.one()


@pytest.mark.integration
class TestRecordSessionService:
    """Test the focus-session recording transaction"""

    async def test_credits_user_and_school(self, test_session, user, school):
        user_id, school_id = user.id, school.id

        focus = await record_session(
            test_session,
            user_id,
            session_date=date.today().isoformat(),
            minutes=25,
            points_per_minute=10,
            location="Library",
        )

        assert focus.points_earned == 250
        assert focus.plan is None
        assert await user_points(test_session, user_id) == 250
        assert await school_points(test_session, school_id) == 250
        assert await count_sessions(test_session, user_id) == 1

    async def test_user_without_school_only_credits_user(self, test_session, other_user, school):
        other_id, school_id = other_user.id, school.id

        await record_session(
            test_session,
            other_id,
            session_date="2024-05-06",
            minutes=5,
            points_per_minute=10,
        )

        assert await user_points(test_session, other_id) == 50
        assert await school_points(test_session, school_id) == 0

    async def test_updates_plan_progress(self, test_session, user, plan, course):
        user_id, plan_id = user.id, plan.id

        focus = await record_session(
            test_session,
            user_id,
            session_date=date.today().isoformat(),
            minutes=25,
            points_per_minute=10,
            plan_id=str(plan_id),
            course_id=str(course.id),
        )

        assert focus.plan.id == plan_id
        assert focus.course.name == "Calculus"
        assert await plan_row(test_session, plan_id) == (25, 1, False)

    async def test_crossing_target_completes_plan(self, test_session, user, course):
        target_plan = StudyPlan(
            user_id=user.id,
            title="One hour",
            date=date.today(),
            start_time=time(8, 0),
            end_time=time(9, 0),
            target_minutes=60,
        )
        test_session.add(target_plan)
        await test_session.commit()
        plan_id = target_plan.id

        focus = await record_session(
            test_session,
            user.id,
            session_date=date.today().isoformat(),
            minutes=70,
            points_per_minute=10,
            plan_id=str(plan_id),
        )

        assert await plan_row(test_session, plan_id) == (70, 1, True)
        assert focus.plan.completed is True

    async def test_zero_target_plan_is_never_completed(self, test_session, user):
        open_plan = StudyPlan(
            user_id=user.id,
            title="No goal",
            date=date.today(),
            start_time=time(8, 0),
            end_time=time(9, 0),
            target_minutes=0,
        )
        test_session.add(open_plan)
        await test_session.commit()
        plan_id = open_plan.id

        await record_session(
            test_session,
            user.id,
            session_date=date.today().isoformat(),
            minutes=300,
            points_per_minute=10,
            plan_id=str(plan_id),
        )

        assert await plan_row(test_session, plan_id) == (300, 1, False)

    async def test_points_are_fixed_at_recording_time(self, test_session, user):
        user_id = user.id

        first = await record_session(
            test_session, user_id, session_date="2024-05-06", minutes=10, points_per_minute=10
        )
        second = await record_session(
            test_session, user_id, session_date="2024-05-07", minutes=10, points_per_minute=3
        )

        assert (first.points_earned, second.points_earned) == (100, 30)
        assert await user_points(test_session, user_id) == 130

    @pytest.mark.parametrize("minutes", [0, -5])
    async def test_non_positive_minutes_rejected(self, test_session, user, minutes):
        user_id = user.id

        with pytest.raises(ValidationError):
            await record_session(
                test_session, user_id, session_date="2024-05-06", minutes=minutes, points_per_minute=10
            )

        assert await count_sessions(test_session, user_id) == 0
        assert await user_points(test_session, user_id) == 0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"session_date": "06/05/2024"},
            {"session_date": "2024-05-06", "plan_id": "not-a-uuid"},
            {"session_date": "2024-05-06", "course_id": "123"},
        ],
    )
    async def test_malformed_input_rejected(self, test_session, user, kwargs):
        user_id = user.id

        with pytest.raises(ValidationError):
            await record_session(test_session, user_id, minutes=25, points_per_minute=10, **kwargs)

        assert await count_sessions(test_session, user_id) == 0

    async def test_missing_plan_rolls_everything_back(self, test_session, user, school):
        user_id, school_id = user.id, school.id

        with pytest.raises(NotFoundError):
            await record_session(
                test_session,
                user_id,
                session_date="2024-05-06",
                minutes=25,
                points_per_minute=10,
                plan_id=str(uuid4()),
            )

        assert await count_sessions(test_session, user_id) == 0
        assert await user_points(test_session, user_id) == 0
        assert await school_points(test_session, school_id) == 0

    async def test_other_users_plan_rolls_everything_back(self, test_session, user, other_user, plan):
        other_id, plan_id = other_user.id, plan.id

        with pytest.raises(NotFoundError):
            await record_session(
                test_session,
                other_id,
                session_date="2024-05-06",
                minutes=25,
                points_per_minute=10,
                plan_id=str(plan_id),
            )

        assert await count_sessions(test_session, other_id) == 0
        assert await user_points(test_session, other_id) == 0
        assert await plan_row(test_session, plan_id) == (0, 0, False)


@pytest.mark.integration
class TestRecordSessionEndpoint:
    """Test POST /api/v1/sessions"""

    async def test_create_session(self, client, auth_headers, plan, course):
        plan_id, course_id = str(plan.id), str(course.id)

        response = await client.post(
            "/api/v1/sessions",
            json={
                "plan_id": plan_id,
                "course_id": course_id,
                "date": date.today().isoformat(),
                "minutes": 25,
                "location": "Library",
            },
            headers=auth_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["minutes"] == 25
        assert data["points_earned"] == 250
        assert data["plan"]["id"] == plan_id
        assert data["plan"]["completed_minutes"] == 25
        assert data["plan"]["pomodoro_count"] == 1
        assert data["course"]["id"] == course_id

        me = await client.get("/api/v1/users/me", headers=auth_headers)
        assert me.json()["total_points"] == 250
        assert me.json()["school"]["total_points"] == 250

    async def test_empty_references_are_ignored(self, client, auth_headers):
        response = await client.post(
            "/api/v1/sessions",
            json={"plan_id": "", "course_id": "", "date": "2024-05-06", "minutes": 10},
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert response.json()["plan_id"] is None
        assert response.json()["course_id"] is None

    async def test_invalid_minutes_is_400(self, client, auth_headers):
        response = await client.post(
            "/api/v1/sessions",
            json={"date": "2024-05-06", "minutes": 0},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": {"code": "VALIDATION_ERROR", "message": "Minutes must be a positive integer"},
        }

    async def test_missing_date_is_400(self, client, auth_headers):
        response = await client.post("/api/v1/sessions", json={"minutes": 10}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    async def test_unknown_plan_is_404(self, client, auth_headers):
        response = await client.post(
            "/api/v1/sessions",
            json={"plan_id": str(uuid4()), "date": "2024-05-06", "minutes": 10},
            headers=auth_headers,
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

        me = await client.get("/api/v1/users/me", headers=auth_headers)
        assert me.json()["total_points"] == 0
        assert me.json()["school"]["total_points"] == 0
        sessions = await client.get("/api/v1/sessions", headers=auth_headers)
        assert sessions.json()["total"] == 0

    async def test_other_users_plan_is_404(self, client, other_auth_headers, plan):
        plan_id = str(plan.id)

        response = await client.post(
            "/api/v1/sessions",
            json={"plan_id": plan_id, "date": "2024-05-06", "minutes": 10},
            headers=other_auth_headers,
        )

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Study plan not found"
        me = await client.get("/api/v1/users/me", headers=other_auth_headers)
        assert me.json()["total_points"] == 0

    async def test_requires_authentication(self, client):
        response = await client.post("/api/v1/sessions", json={"date": "2024-05-06", "minutes": 10})

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHORIZED"

    async def test_list_sessions_paginates(self, client, auth_headers):
        for minutes in (10, 20, 30):
            await client.post(
                "/api/v1/sessions",
                json={"date": "2024-05-06", "minutes": minutes},
                headers=auth_headers,
            )

        response = await client.get("/api/v1/sessions?limit=2", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert data["limit"] == 2
        assert data["offset"] == 0
        assert len(data["sessions"]) == 2

    async def test_list_sessions_filters_by_date(self, client, auth_headers):
        await client.post(
            "/api/v1/sessions", json={"date": "2024-05-01", "minutes": 10}, headers=auth_headers
        )
        await client.post(
            "/api/v1/sessions", json={"date": "2024-05-10", "minutes": 10}, headers=auth_headers
        )

        response = await client.get("/api/v1/sessions?start_date=2024-05-05", headers=auth_headers)

        assert response.json()["total"] == 1
        assert response.json()["sessions"][0]["date"] == "2024-05-10"
