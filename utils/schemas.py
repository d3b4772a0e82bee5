"""
Pydantic schemas for request bodies and response payloads.

Request fields are all optional so that missing values reach the explicit
validators in ``utils.validators`` (answered with 400) instead of being
rejected by FastAPI with 422.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ═══════════════════════════════════════════════════════════════════════════════
# Auth
# ═══════════════════════════════════════════════════════════════════════════════


class SignupRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    full_name: Optional[str] = Field(None, alias="fullName")
    username: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    location: Optional[str] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = Field(None, alias="confirmPassword")


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class MessageResponse(BaseModel):
    message: str


class LoginResponse(BaseModel):
    message: str
    token: str


# ═══════════════════════════════════════════════════════════════════════════════
# Reports
# ═══════════════════════════════════════════════════════════════════════════════


class ReportRequest(BaseModel):
    type: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    contact: Optional[str] = None
    severity: Optional[str] = None

    @field_validator("type", "location", "description", "contact", "severity", mode="before")
    @classmethod
    def _scalars_as_text(cls, value: Any) -> Any:
        """Numbers and booleans are stored as their text form."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value


class ReportOut(BaseModel):
    """A stored report as returned to clients (``_id`` keeps the legacy key)."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: uuid.UUID = Field(..., alias="_id", validation_alias="report_id")
    type: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    contact: Optional[str] = None
    severity: Optional[str] = None
    timestamp: datetime

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
