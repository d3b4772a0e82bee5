"""
Auth API routes — signup, login.

Route prefix: /api/auth
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Union

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.dependencies import get_auth_service
from auth.service import AuthService
from utils.result import ErrorKind, Failure
from utils.schemas import LoginRequest, LoginResponse, MessageResponse, SignupRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def _failure_response(failure: Failure) -> JSONResponse:
    if failure.kind is ErrorKind.INTERNAL:
        return JSONResponse(
            status_code=failure.status_code,
            content={"error": "Internal Server Error"},
        )
    return JSONResponse(
        status_code=failure.status_code,
        content={"message": failure.message},
    )


@router.post(
    "/signup",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    req: SignupRequest,
    service: AuthService = Depends(get_auth_service),
) -> Union[Dict[str, Any], JSONResponse]:
    """Register a new user."""
    result = await service.signup(req)
    if not result.ok:
        return _failure_response(result)
    return {"message": result.value}


@router.post("/login", response_model=LoginResponse)
async def login(
    req: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> Union[Dict[str, Any], JSONResponse]:
    """Login with username + password."""
    result = await service.login(req)
    if not result.ok:
        return _failure_response(result)
    return {"message": "Login successful", "token": result.value}
