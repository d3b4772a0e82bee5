"""
Explicit validation of request payloads.

Each validator returns a ``Result`` and is called before anything touches
the database.
"""

from __future__ import annotations

import re
from typing import Optional

from utils.result import ErrorKind, Failure, Result, Success
from utils.schemas import LoginRequest, ReportRequest, SignupRequest

PHONE_PATTERN = re.compile(r"\+?[0-9]{10,15}")
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")

_SIGNUP_REQUIRED = (
    ("full_name", "fullName"),
    ("username", "username"),
    ("phone", "phone"),
    ("email", "email"),
    ("location", "location"),
    ("password", "password"),
)

_REPORT_FIELDS = ("type", "location", "description", "contact", "severity")


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_signup(req: SignupRequest) -> Result:
    """Password confirmation, required fields, then phone/email formats."""
    if req.password != req.confirm_password:
        return Failure(ErrorKind.VALIDATION, "Passwords do not match")

    for attr, name in _SIGNUP_REQUIRED:
        if is_blank(getattr(req, attr)):
            return Failure(ErrorKind.VALIDATION, f"{name} is required")

    if not PHONE_PATTERN.fullmatch(req.phone):
        return Failure(
            ErrorKind.VALIDATION,
            "Enter a valid phone number. E.g., +1234567890",
        )
    if not EMAIL_PATTERN.fullmatch(req.email):
        return Failure(ErrorKind.VALIDATION, "Enter a valid email address")

    return Success(req)


def validate_login(req: LoginRequest) -> Result:
    if is_blank(req.username) or is_blank(req.password):
        return Failure(ErrorKind.VALIDATION, "Username and password are required")
    return Success(req)


def validate_report(req: ReportRequest) -> Result:
    if any(is_blank(getattr(req, name)) for name in _REPORT_FIELDS):
        return Failure(ErrorKind.VALIDATION, "All fields are required")
    return Success(req)
