"""
Signup and login use cases.
"""

from __future__ import annotations

import logging

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.jwt import create_token
from auth.models import User
from auth.password import hash_password, verify_password
from config.settings import Settings
from utils.result import ErrorKind, Failure, Result, Success
from utils.schemas import LoginRequest, SignupRequest
from utils.validators import validate_login, validate_signup

logger = logging.getLogger(__name__)

USER_EXISTS = "User with this email, username, or phone already exists"


class AuthService:
    def __init__(self, session: AsyncSession, settings: Settings) -> None:
        self.session = session
        self.settings = settings

    async def signup(self, req: SignupRequest) -> Result:
        """Register a new user.

        The OR lookup gives the early answer; the unique constraints on
        ``users`` are what actually guarantee one account per username,
        email and phone when two signups race.
        """
        checked = validate_signup(req)
        if not checked.ok:
            return checked

        try:
            result = await self.session.execute(
                select(User.user_id).where(
                    or_(
                        User.email == req.email,
                        User.username == req.username,
                        User.phone == req.phone,
                    )
                ).limit(1)
            )
            if result.scalar_one_or_none() is not None:
                return Failure(ErrorKind.CONFLICT, USER_EXISTS)

            user = User(
                full_name=req.full_name,
                username=req.username,
                phone=req.phone,
                email=req.email,
                location=req.location,
                password_hash=hash_password(req.password, self.settings.bcrypt_rounds),
            )
            self.session.add(user)
            await self.session.flush()
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            logger.info("Signup rejected by unique constraint for %s", req.username)
            return Failure(ErrorKind.CONFLICT, USER_EXISTS)
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.exception("Signup failed for %s", req.username)
            return Failure(ErrorKind.INTERNAL, "Internal Server Error", details=str(exc))

        logger.info("Registered user %s (%s)", user.username, user.user_id)
        return Success("User created successfully")

    async def login(self, req: LoginRequest) -> Result:
        """Check username + password and issue a 1-hour token."""
        checked = validate_login(req)
        if not checked.ok:
            return checked

        try:
            result = await self.session.execute(
                select(User).where(User.username == req.username)
            )
            user = result.scalar_one_or_none()
        except SQLAlchemyError as exc:
            logger.exception("Login lookup failed for %s", req.username)
            return Failure(ErrorKind.INTERNAL, "Internal Server Error", details=str(exc))

        if user is None:
            return Failure(ErrorKind.NOT_FOUND, "User not found")

        if not verify_password(req.password, user.password_hash):
            logger.info("Login: bad password for %s", req.username)
            return Failure(ErrorKind.AUTH, "Invalid credentials")

        token = create_token(str(user.user_id), self.settings)
        logger.info("Login: %s (%s)", user.username, user.user_id)
        return Success(token)
