"""
Medsite Backend — Admin Schemas
================================

Request bodies and responses for admin creation and signin. Password hashes
never appear in any response model.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from medsite.schemas.common import RequestPayload


class AdminCredentials(RequestPayload):
    """Body of POST /admin/admins and POST /admin/signin."""
    username: Optional[str] = None
    password: Optional[str] = None


class AdminOut(BaseModel):
    id: int
    username: str
    created_at: datetime


class AdminIdentity(BaseModel):
    id: int
    username: str


class AdminCreatedResponse(BaseModel):
    message: str = "Admin created successfully"
    admin: AdminOut


class SigninResponse(BaseModel):
    message: str = "Signin successful"
    token: str = Field(description="Bearer token, valid for 24 hours")
    admin: AdminIdentity
