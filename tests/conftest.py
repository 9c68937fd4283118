# tests/conftest.py

import os

# keep the application's own engine off the working directory
os.environ.setdefault("SQLALCHEMY_DATABASE_URI", "sqlite://")

from datetime import date
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_student_repository
from app.core.database import get_db
from app.models.models import Base, Student
from app.repositories.student_repository import SQLAlchemyStudentRepository, StudentRepository
from main import app


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def repository(db_session):
    return SQLAlchemyStudentRepository(db_session)


@pytest.fixture
def client(db_session):
    app.dependency_overrides[get_db] = lambda: db_session
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def mock_repository():
    return MagicMock(spec=StudentRepository)


@pytest.fixture
def mock_client(mock_repository):
    app.dependency_overrides[get_student_repository] = lambda: mock_repository
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def george_form():
    return {
        "student_id": "171620254",
        "first_name": "George",
        "last_name": "Franklin",
        "sex": "male",
        "birth_date": "",
        "address": "110 W. Liberty St.",
        "department": "CS",
    }


@pytest.fixture
def george():
    return Student(
        id=1,
        student_id="171620254",
        first_name="George",
        last_name="Franklin",
        sex="male",
        birth_date=date(2000, 9, 7),
        address="110 W. Liberty St.",
        department="CS",
    )


@pytest.fixture
def make_student():
    """Factory for transient students with every required field filled in."""

    def _make_student(last_name, first_name="Jean", student_id="100000001", **kw):
        fields = dict(
            student_id=student_id,
            first_name=first_name,
            last_name=last_name,
            sex="female",
            address="638 Cardinal Ave.",
            department="EE",
        )
        fields.update(kw)
        return Student(**fields)

    return _make_student
