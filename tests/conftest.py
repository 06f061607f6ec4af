"""Pytest fixtures for testing"""

import pytest
from datetime import date, timedelta
from decimal import Decimal
from typing import Callable, Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from budget_guru.api.main import create_app
from budget_guru.infrastructure.database.models import Base
from budget_guru.infrastructure.database.session import get_db
from budget_guru.domain.models import GoalRecord, IncomeRecord


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def make_income() -> Callable[..., IncomeRecord]:
    """Factory for income records; `day` orders them within January 2024"""

    def _make(amount, day: int = 1) -> IncomeRecord:
        return IncomeRecord(amount=Decimal(str(amount)), date=date(2024, 1, day))

    return _make


@pytest.fixture
def make_goal() -> Callable[..., GoalRecord]:
    """Factory for goal records"""

    def _make(name: str, amount) -> GoalRecord:
        return GoalRecord(name=name, amount=Decimal(str(amount)))

    return _make


@pytest.fixture
def monthly_incomes() -> list[IncomeRecord]:
    """Three monthly salary payments, oldest first"""
    start = date(2024, 1, 31)
    return [
        IncomeRecord(amount=Decimal(1000), date=start + timedelta(days=30 * month))
        for month in range(3)
    ]


@pytest.fixture
def split_goals(make_goal) -> list[GoalRecord]:
    """A small goal and a large goal sharing every payment 10/90"""
    return [make_goal("Emergency fund", 10), make_goal("Holiday", 90)]
