"""
Inkpost Backend — Credential Store
====================================

What:  Registers users and verifies email/password pairs.
Why:   The only place that touches password hashes. Everything downstream of
       login deals in TokenClaims, never in credentials.
How:   bcrypt with a fixed cost factor (BCRYPT_ROUNDS, default 10). Hashing
       is CPU-bound, so it runs in a worker thread to keep the event loop free.

Failure semantics:
    register(): DuplicateEmailError if the email is taken. Checked up front
                and again via the UNIQUE constraint at flush time, so a racing
                signup cannot create a second record.
    verify():   InvalidCredentialsError for unknown email AND wrong password.
                Unknown emails are still checked against a dummy hash so
                both paths take about the same time.

Plaintext passwords are never logged.
"""

import asyncio
import logging
import uuid
from typing import Optional

import bcrypt
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.exceptions import (
    DatabaseError,
    DuplicateEmailError,
    InvalidCredentialsError,
)
from app.models.user import User

logger = logging.getLogger(__name__)


class CredentialStore:
    """Owns identity records and password verification."""

    def __init__(self, rounds: Optional[int] = None):
        self.rounds = rounds or settings.bcrypt_rounds
        self._dummy_hash: Optional[bytes] = None

    async def hash_password(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        hashed = await asyncio.to_thread(bcrypt.hashpw, password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    async def check_password(self, password: str, password_hash: str) -> bool:
        try:
            return await asyncio.to_thread(
                bcrypt.checkpw, password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except ValueError:
            # Corrupt stored hash
            logger.error("Stored password hash could not be parsed")
            return False

    async def _burn_dummy_check(self, password: str) -> None:
        if self._dummy_hash is None:
            self._dummy_hash = (await self.hash_password(uuid.uuid4().hex)).encode("utf-8")
        await asyncio.to_thread(bcrypt.checkpw, password.encode("utf-8"), self._dummy_hash)

    async def get_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def register(
        self,
        db: AsyncSession,
        name: str,
        email: str,
        password: str,
        image: Optional[str] = None,
    ) -> uuid.UUID:
        """
        Create a user and return its id.

        Raises:
            DuplicateEmailError: email already registered (no state is changed)
            DatabaseError:       unexpected persistence failure
        """
        try:
            if await self.get_by_email(db, email) is not None:
                raise DuplicateEmailError()

            user = User(
                name=name,
                email=email,
                password_hash=await self.hash_password(password),
                image=image,
            )
            db.add(user)
            await db.flush()
            logger.info("User registered: %s", user.id)
            return user.id

        except DuplicateEmailError:
            raise
        except IntegrityError:
            # Lost a race with a concurrent signup for the same email.
            # get_db_session rolls the request back when this propagates.
            raise DuplicateEmailError(context={"race": True})
        except SQLAlchemyError as e:
            logger.error("Database error during signup: %s", str(e), exc_info=True)
            raise DatabaseError(context={"operation": "register"})

    async def verify(self, db: AsyncSession, email: str, password: str) -> User:
        """
        Return the user whose email and password match.

        Raises:
            InvalidCredentialsError: unknown email or wrong password
            DatabaseError:           unexpected persistence failure
        """
        try:
            user = await self.get_by_email(db, email)
        except SQLAlchemyError as e:
            logger.error("Database error during login: %s", str(e), exc_info=True)
            raise DatabaseError(context={"operation": "verify"})

        if user is None:
            await self._burn_dummy_check(password)
            raise InvalidCredentialsError()

        if not await self.check_password(password, user.password_hash):
            logger.info("Failed login for user %s", user.id)
            raise InvalidCredentialsError()

        return user


credential_store = CredentialStore()
