"""
Inkpost Backend — Auth Route Handlers
=======================================

What:  POST /signup and POST /login. The only unauthenticated write paths.
How:   Validate the JSON body (pydantic), delegate to the credential store,
       mint a token on successful login.

Both endpoints sit behind the per-IP rate limiter (middleware/rate_limit.py).
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    SignupRequest,
    SignupResponse,
    TokenClaim,
)
from app.schemas.common import AuthorSummary, ErrorResponse
from app.services.credential_service import credential_store
from app.services.token_service import token_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


@router.post(
    "/signup",
    status_code=201,
    response_model=SignupResponse,
    responses={
        400: {"description": "Email already registered", "model": ErrorResponse},
        422: {"description": "Malformed body", "model": ErrorResponse},
    },
    summary="Register a new user",
)
async def signup(
    body: SignupRequest,
    db: AsyncSession = Depends(get_db_session),
) -> SignupResponse:
    user_id = await credential_store.register(
        db=db,
        name=body.name,
        email=body.email,
        password=body.password,
        image=body.image,
    )
    return SignupResponse(user_id=user_id)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"description": "Invalid credentials", "model": ErrorResponse},
        422: {"description": "Malformed body", "model": ErrorResponse},
    },
    summary="Exchange email and password for a bearer token",
)
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_db_session),
) -> LoginResponse:
    """
    Unknown email and wrong password produce the same 400 response.

    The token is valid for TOKEN_TTL_DAYS (7 by default) from now and is
    sent back as `Authorization: Bearer <token>`.
    """
    user = await credential_store.verify(db, body.email, body.password)
    token = token_service.issue(TokenClaim(user_id=user.id, email=user.email))
    logger.info("User %s logged in", user.id)
    return LoginResponse(
        token=token,
        user=AuthorSummary(id=user.id, name=user.name, email=user.email, image=user.image),
    )
