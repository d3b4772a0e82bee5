"""
FastAPI dependencies (shared across routes).
"""

from __future__ import annotations

from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from auth.service import AuthService
from config.settings import Settings
from database.session import Database
from reports.service import ReportService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> Database:
    return request.app.state.database


async def db_session(
    database: Database = Depends(get_database),
) -> AsyncGenerator[AsyncSession, None]:
    """One session per request, committed when the handler returns."""
    async with database.session() as session:
        yield session


def get_auth_service(
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(session, settings)


def get_report_service(
    session: AsyncSession = Depends(db_session),
) -> ReportService:
    return ReportService(session)
