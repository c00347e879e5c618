"""HTTP tests for the organizer dashboard endpoints.

Run with: pytest tests/test_dashboard_api.py -v
"""

from datetime import datetime, timedelta
from uuid import UUID

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from eventry.api.deps import (
    get_analytics_service,
    get_current_organizer_user,
    get_current_user,
)
from eventry.core.config import settings
from eventry.db.base import Base
from eventry.db.session import get_db
from eventry.main import app
from eventry.models.user import User, UserRole
from eventry.services.analytics_service import AnalyticsService
from tests.factories import (
    EVENT_ID,
    InMemoryAnalyticsStore,
    access_token,
    check_in,
    consumption,
    event,
    night,
)

EVENTS_URL = f"{settings.API_V1_STR}/dashboard/events"
GENERAL_URL = f"{settings.API_V1_STR}/dashboard/general"


class ExplodingStore(InMemoryAnalyticsStore):
    def find_check_ins(self, event_ids):
        raise RuntimeError("connection reset")


def _store():
    return InMemoryAnalyticsStore(
        events=[event()],
        check_ins=[
            check_in(night(22, 5), price=10),
            check_in(night(22, 20), price=10),
            check_in(night(22, 50), price=0),
        ],
        consumptions=[consumption("6")],
    )


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def organizer(client):
    user = User(email="org@example.com", role=UserRole.ORGANIZER, is_active=True)
    app.dependency_overrides[get_current_organizer_user] = lambda: user
    return user


def _use_store(store):
    app.dependency_overrides[get_analytics_service] = lambda: AnalyticsService(store)


class TestEventDashboard:
    """GET /dashboard/events/{event_id}"""

    def test_returns_camel_case_report(self, client, organizer):
        """The report is serialized with camelCase keys."""
        _use_store(_store())

        response = client.get(f"{EVENTS_URL}/{EVENT_ID}")

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {
            "event", "overview", "timeline", "audience",
            "prPerformance", "topPr", "monetization", "consumptions",
        }
        assert data["overview"]["totalEntries"] == 3
        assert data["overview"]["peakTimeSlot"] == "22:00"
        assert data["overview"]["totalConsumptionsRevenue"] == 6
        assert data["event"]["venue"] == "Club Aurora"
        assert data["topPr"] is None

    def test_filters_by_clock_range(self, client, organizer):
        """startTime/endTime narrow the counted entries."""
        _use_store(_store())

        response = client.get(
            f"{EVENTS_URL}/{EVENT_ID}", params={"startTime": "22:15", "endTime": "23:00"}
        )

        assert response.status_code == 200
        assert response.json()["overview"]["totalEntries"] == 2

    def test_time_based_event_id(self, client, organizer):
        """Ids written upstream need not be version 4."""
        v1_id = UUID("6f1c3a52-2d0e-11f0-9d55-0b7f2f9a1e01")
        _use_store(InMemoryAnalyticsStore(
            events=[event(event_id=v1_id)],
            check_ins=[check_in(night(23, 0), price=10, event_id=v1_id)],
        ))

        response = client.get(f"{EVENTS_URL}/{v1_id}")

        assert response.status_code == 200
        assert response.json()["event"]["id"] == str(v1_id)
        assert response.json()["overview"]["totalEntries"] == 1

    def test_unknown_event_is_404(self, client, organizer):
        """Missing events map to 404."""
        _use_store(InMemoryAnalyticsStore())
        response = client.get(f"{EVENTS_URL}/{EVENT_ID}")
        assert response.status_code == 404
        assert response.json()["detail"] == "Event not found"

    def test_malformed_event_id_is_404(self, client, organizer):
        """A non-UUID path segment is reported as not found."""
        _use_store(_store())
        assert client.get(f"{EVENTS_URL}/tonight").status_code == 404

    def test_out_of_range_clock_is_400(self, client, organizer):
        """A well-shaped but impossible clock value is a bad request."""
        _use_store(_store())
        response = client.get(f"{EVENTS_URL}/{EVENT_ID}", params={"startTime": "24:30"})
        assert response.status_code == 400

    def test_store_failure_is_500(self, client, organizer):
        """Unexpected failures become a generic 500 without partial data."""
        _use_store(ExplodingStore(events=[event()]))
        response = client.get(f"{EVENTS_URL}/{EVENT_ID}")
        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}


class TestGeneralDashboard:
    """GET /dashboard/general"""

    def test_empty_month(self, client, organizer):
        """A month without events returns a zeroed report."""
        _use_store(_store())

        response = client.get(GENERAL_URL, params={"period": "month", "month": 2, "year": 2026})

        assert response.status_code == 200
        data = response.json()
        assert data["period"]["type"] == "month"
        assert data["overview"]["totalEvents"] == 0
        assert data["eventsBreakdown"] == []
        assert data["audience"]["avgAge"] is None

    def test_year_report(self, client, organizer):
        """A year with one event aggregates it and carries a monthly trend."""
        _use_store(_store())

        response = client.get(GENERAL_URL, params={"period": "year", "year": 2026})

        data = response.json()
        assert data["overview"]["totalEvents"] == 1
        assert data["overview"]["totalRevenue"] == 26
        assert len(data["monthlyTrend"]) == 12
        assert data["topEvents"][0]["title"] == "Saturday Night"

    def test_time_based_event_ids_in_breakdown(self, client, organizer):
        """Breakdown and top events accept non-v4 event ids."""
        v1_id = UUID("6f1c3a52-2d0e-11f0-9d55-0b7f2f9a1e01")
        _use_store(InMemoryAnalyticsStore(
            events=[event(event_id=v1_id)],
            check_ins=[check_in(night(23, 0), price=10, event_id=v1_id)],
        ))

        response = client.get(GENERAL_URL, params={"period": "year", "year": 2026})

        assert response.status_code == 200
        data = response.json()
        assert data["eventsBreakdown"][0]["eventId"] == str(v1_id)
        assert data["topEvents"][0]["id"] == str(v1_id)

    def test_rejects_unknown_period(self, client, organizer):
        """Query validation rejects selectors outside month/year/all."""
        _use_store(_store())
        assert client.get(GENERAL_URL, params={"period": "week"}).status_code == 422

    def test_store_failure_is_500(self, client, organizer):
        """A failing load is logged and answered with 500."""
        _use_store(ExplodingStore(events=[event(date_start=datetime(2026, 3, 14, 22))]))
        response = client.get(GENERAL_URL, params={"period": "year", "year": 2026})
        assert response.status_code == 500


class TestAuthorization:
    """Role and token checks in front of both endpoints."""

    @pytest.fixture
    def session(self):
        engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(bind=engine)
        db = sessionmaker(bind=engine)()
        app.dependency_overrides[get_db] = lambda: db
        try:
            yield db
        finally:
            db.close()
            engine.dispose()

    def _user(self, db, role, is_active=True):
        user = User(email=f"{role.value.lower()}@example.com", role=role, is_active=is_active)
        db.add(user)
        db.commit()
        return user

    def test_missing_token_is_403(self, client, session):
        """No bearer token, no report."""
        _use_store(_store())
        assert client.get(f"{EVENTS_URL}/{EVENT_ID}").status_code == 403

    def test_invalid_token_is_403(self, client, session):
        """A token that fails verification is rejected."""
        _use_store(_store())
        response = client.get(GENERAL_URL, headers={"Authorization": "Bearer not-a-jwt"})
        assert response.status_code == 403

    def test_expired_token_is_403(self, client, session):
        """An expired token is rejected even for an organizer."""
        _use_store(_store())
        user = self._user(session, UserRole.ORGANIZER)
        token = access_token(user.id, expires_in=timedelta(minutes=-5))
        response = client.get(GENERAL_URL, headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 403

    @pytest.mark.parametrize("role", [UserRole.PR, UserRole.STAFF, UserRole.USER])
    def test_non_organizer_roles_are_403(self, client, session, role):
        """Only organizers and admins may read dashboards."""
        _use_store(_store())
        token = access_token(self._user(session, role).id)
        response = client.get(GENERAL_URL, headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 403

    def test_inactive_user_is_403(self, client, session):
        """Deactivated accounts are rejected even with a valid token."""
        _use_store(_store())
        token = access_token(self._user(session, UserRole.ADMIN, is_active=False).id)
        response = client.get(GENERAL_URL, headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 403

    @pytest.mark.parametrize("role", [UserRole.ORGANIZER, UserRole.ADMIN])
    def test_organizer_and_admin_allowed(self, client, session, role):
        """A valid token for an organizer or admin gets the report."""
        _use_store(_store())
        token = access_token(self._user(session, role).id)
        response = client.get(
            f"{EVENTS_URL}/{EVENT_ID}", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 200

    def test_current_user_override(self, client):
        """Overriding the base user dependency still enforces the role check."""
        _use_store(_store())
        app.dependency_overrides[get_current_user] = lambda: User(role=UserRole.PR, is_active=True)
        assert client.get(GENERAL_URL).status_code == 403
