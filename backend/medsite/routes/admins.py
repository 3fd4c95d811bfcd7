"""
Medsite Backend — Admin Account Routes
=======================================

What:  POST /admin/admins (create an admin) and POST /admin/signin (exchange
       credentials for a 24-hour bearer token). Neither requires a token.
"""

import logging

from fastapi import APIRouter, Depends

from medsite.database import Database, get_database
from medsite.schemas.admin import (
    AdminCredentials,
    AdminCreatedResponse,
    AdminIdentity,
    AdminOut,
    SigninResponse,
)
from medsite.schemas.common import ErrorResponse
from medsite.services.admin_service import admin_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admins"])


@router.post(
    "/admins",
    status_code=201,
    response_model=AdminCreatedResponse,
    responses={400: {"description": "Invalid input or username taken", "model": ErrorResponse}},
    summary="Create an admin account",
)
async def create_admin(
    payload: AdminCredentials,
    db: Database = Depends(get_database),
) -> AdminCreatedResponse:
    admin = await admin_service.create_admin(db, payload.username, payload.password)
    return AdminCreatedResponse(admin=AdminOut(**admin))


@router.post(
    "/signin",
    response_model=SigninResponse,
    responses={
        400: {"description": "Missing username or password", "model": ErrorResponse},
        401: {"description": "Invalid credentials", "model": ErrorResponse},
    },
    summary="Sign in and receive a bearer token",
)
async def sign_in(
    payload: AdminCredentials,
    db: Database = Depends(get_database),
) -> SigninResponse:
    result = await admin_service.sign_in(db, payload.username, payload.password)
    return SigninResponse(token=result["token"], admin=AdminIdentity(**result["admin"]))
