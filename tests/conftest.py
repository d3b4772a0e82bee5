"""
Shared fixtures: a throwaway SQLite database per test and an app bound to it.
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from config.settings import Settings
from database.session import Database


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'reports.db'}",
        jwt_secret="test-secret",
        bcrypt_rounds=4,
    )


@pytest_asyncio.fixture
async def database(settings):
    db = Database(settings.database_url)
    await db.create_tables()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def session(database):
    async with database.session_factory() as s:
        yield s


@pytest.fixture
def client(settings):
    from main import create_app

    with TestClient(create_app(settings)) as c:
        yield c


def signup_body(**overrides) -> dict:
    body = {
        "fullName": "A B",
        "username": "ab1",
        "phone": "+12345678901",
        "email": "a@b.com",
        "location": "X",
        "password": "pw",
        "confirmPassword": "pw",
    }
    body.update(overrides)
    return body


def report_body(**overrides) -> dict:
    body = {
        "type": "flood",
        "location": "Main St",
        "description": "Water over the road",
        "contact": "+12345678901",
        "severity": "high",
    }
    body.update(overrides)
    return body
