"""Pytest fixtures for the HRMS backend.

Tests run against an in-memory SQLite database built from the ORM metadata.
Each test gets a fresh schema, so no cleanup is needed between tests.

Usage:
    def test_get_objective(client: TestClient, reportee, objective_factory):
        obj = objective_factory(reportee)
        response = client.get(f"/api/v1/performance/objectives/{obj.id}", headers={"X-User-Id": str(obj.employee_id)})
        assert response.status_code == 200
"""

from __future__ import annotations

import os
import typing as t
from datetime import date, timedelta

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("AUTH_MODE", "demo")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from hrms.database import Base, get_db
from hrms.main import app
from hrms.models import audit_log, employee, objective, performance  # noqa: F401
from hrms.models.employee import Employee
from hrms.models.objective import Objective
from hrms.models.performance import PerformanceCampaign, PerformanceReview
from hrms.schemas.objectives import ObjectiveCreate
from hrms.services import objectives as objective_service


@pytest.fixture
def engine() -> t.Generator[Engine]:
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory: sessionmaker) -> t.Generator[Session]:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory: sessionmaker) -> t.Generator[TestClient]:
    """TestClient whose requests use the test database."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def employee_factory(db_session: Session) -> t.Callable[..., Employee]:
    """Create employees. Pass manager=<Employee> to set the line manager."""
    counter = {"n": 0}

    def create_employee(
        full_name: str | None = None,
        role: str = "employee",
        manager: Employee | None = None,
        active: bool = True,
    ) -> Employee:
        counter["n"] += 1
        emp = Employee(
            full_name=full_name or f"Employee {counter['n']}",
            email=f"employee{counter['n']}@example.com",
            role=role,
            manager_user_id=manager.id if manager else None,
            active=active,
        )
        db_session.add(emp)
        db_session.commit()
        db_session.refresh(emp)
        return emp

    return create_employee


@pytest.fixture
def manager(employee_factory: t.Callable[..., Employee]) -> Employee:
    return employee_factory(full_name="Maya Manager", role="manager")


@pytest.fixture
def reportee(employee_factory: t.Callable[..., Employee], manager: Employee) -> Employee:
    return employee_factory(full_name="Ravi Reportee", manager=manager)


@pytest.fixture
def review_factory(db_session: Session) -> t.Callable[..., PerformanceReview]:
    """Create a review for employee/manager inside a shared campaign."""
    campaign = {}

    def create_review(employee: Employee, manager: Employee) -> PerformanceReview:
        if "obj" not in campaign:
            campaign["obj"] = PerformanceCampaign(title="Annual Review", year=date.today().year, status="ACTIVE")
            db_session.add(campaign["obj"])
            db_session.flush()
        review = PerformanceReview(
            campaign_id=campaign["obj"].id,
            employee_id=employee.id,
            manager_id=manager.id,
        )
        db_session.add(review)
        db_session.commit()
        db_session.refresh(review)
        return review

    return create_review


@pytest.fixture
def objective_factory(db_session: Session) -> t.Callable[..., Objective]:
    """Create objectives through the lifecycle service.

    The creator defaults to the owning employee.
    """

    def create_objective(
        employee: Employee,
        creator: Employee | None = None,
        **fields: t.Any,
    ) -> Objective:
        fields.setdefault("title", "Ship the quarterly release")
        fields.setdefault("start_date", date.today())
        fields.setdefault("due_date", date.today() + timedelta(days=30))
        data = ObjectiveCreate(employee_id=employee.id, **fields)
        creator_id = creator.id if creator else employee.id
        return objective_service.create_objective(db_session, data, creator_id)

    return create_objective
