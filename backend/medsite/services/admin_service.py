"""
Medsite Backend — Admin Service
================================

What:  Admin account creation and signin.
Who:   Called by the /admin/admins and /admin/signin route handlers.

Signin flow:
    ┌──────────┐   ┌──────────────┐   ┌────────────────┐   ┌────────────┐
    │ Validate │──▶│ SELECT admin │──▶│ bcrypt verify  │──▶│ Issue JWT  │
    └──────────┘   └──────────────┘   └────────────────┘   └────────────┘
    Unknown username and wrong password produce the same 401.
"""

import logging
from typing import Any, Dict, Optional

from sqlalchemy import insert, select

from medsite.database import Database, Row
from medsite.exceptions import (
    ConflictError,
    ConstraintViolationError,
    InvalidCredentialsError,
)
from medsite.models.admin import Admin
from medsite.services.passwords import hash_password, verify_password
from medsite.services.token_service import AdminClaims, TokenService, token_service
from medsite.services.validation import require_fields, require_min_length

logger = logging.getLogger(__name__)

admins = Admin.__table__

MIN_PASSWORD_LENGTH = 6


class AdminService:
    """Stateless; the database handle and token service are passed in."""

    def __init__(self, tokens: TokenService = token_service):
        self.tokens = tokens

    async def create_admin(
        self,
        db: Database,
        username: Optional[str],
        password: Optional[str],
    ) -> Row:
        """
        Registers a new admin.

        Returns:
            The inserted row: id, username, created_at (never the hash).

        Raises:
            ValidationError: Missing field or password under 6 characters
            ConflictError: Username already taken
        """
        require_fields(
            {"username": username, "password": password},
            "Username and password are required",
        )
        require_min_length(
            password,
            MIN_PASSWORD_LENGTH,
            field="password",
            message=f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
        )

        existing = await db.execute(
            select(admins.c.username).where(admins.c.username == username)
        )
        if existing:
            raise ConflictError("Admin with this username already exists")

        hashed = await hash_password(password)

        try:
            rows = await db.execute(
                insert(admins)
                .values(username=username, password=hashed)
                .returning(admins.c.id, admins.c.username, admins.c.created_at)
            )
        except ConstraintViolationError:
            # Lost a race with a concurrent signup for the same username
            raise ConflictError("Admin with this username already exists")

        admin = rows[0]
        logger.info("Admin created: id=%s username=%s", admin["id"], admin["username"])
        return admin

    async def sign_in(
        self,
        db: Database,
        username: Optional[str],
        password: Optional[str],
    ) -> Dict[str, Any]:
        """
        Checks credentials and issues a session token.

        Returns:
            {"token": str, "admin": {"id": int, "username": str}}

        Raises:
            ValidationError: Missing field
            InvalidCredentialsError: Unknown username or wrong password
        """
        require_fields(
            {"username": username, "password": password},
            "Username and password are required",
        )

        rows = await db.execute(
            select(admins.c.id, admins.c.username, admins.c.password)
            .where(admins.c.username == username)
        )
        if not rows:
            raise InvalidCredentialsError(context={"reason": "unknown_username"})

        admin = rows[0]
        if not await verify_password(password, admin["password"]):
            raise InvalidCredentialsError(context={"reason": "wrong_password"})

        token = self.tokens.issue(AdminClaims(id=admin["id"], username=admin["username"]))
        logger.info("Admin signed in: id=%s", admin["id"])
        return {
            "token": token,
            "admin": {"id": admin["id"], "username": admin["username"]},
        }


admin_service = AdminService()
