"""
SQLAlchemy ORM models for users and incident reports.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Index, String, Text, Uuid
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    user_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    full_name = Column(Text, nullable=False)
    username = Column(Text, unique=True, nullable=False)
    phone = Column(String(16), unique=True, nullable=False)
    email = Column(Text, unique=True, nullable=False)
    location = Column(Text, nullable=False)
    password_hash = Column(Text, nullable=False)


class Report(Base):
    __tablename__ = "reports"

    report_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    type = Column(Text)
    location = Column(Text)
    description = Column(Text)
    contact = Column(Text)
    severity = Column(Text)
    timestamp = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (Index("ix_reports_type_timestamp", "type", "timestamp"),)
