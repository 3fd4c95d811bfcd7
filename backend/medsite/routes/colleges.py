"""
Medsite Backend — College Routes
=================================

Public:     GET /colleges (summary cards), GET /colleges/{id} (full record)
Protected:  POST /admin/colleges, PUT/DELETE /admin/colleges/{id}
"""

from fastapi import APIRouter, Depends

from medsite.auth import AdminRoute, require_admin
from medsite.database import Database, get_database
from medsite.schemas.college import (
    CollegeCreatedResponse,
    CollegeDetail,
    CollegeListResponse,
    CollegePayload,
    CollegeResponse,
    CollegeSummary,
    CollegeUpdatedResponse,
)
from medsite.schemas.common import ErrorResponse, MessageResponse
from medsite.services.college_service import college_service
from medsite.services.token_service import AdminClaims

router = APIRouter(tags=["Colleges"])
admin_router = APIRouter(tags=["Colleges"], route_class=AdminRoute)

ADMIN_ERRORS = {
    400: {"description": "Validation error, unknown country or duplicate", "model": ErrorResponse},
    401: {"description": "Access token required", "model": ErrorResponse},
    403: {"description": "Invalid or expired token", "model": ErrorResponse},
}
NOT_FOUND = {404: {"description": "College not found", "model": ErrorResponse}}


@router.get("/colleges", response_model=CollegeListResponse, summary="List colleges")
async def list_colleges(db: Database = Depends(get_database)) -> CollegeListResponse:
    rows = await college_service.list_colleges(db)
    return CollegeListResponse(colleges=[CollegeSummary(**row) for row in rows])


@router.get(
    "/colleges/{college_id}",
    response_model=CollegeResponse,
    responses=NOT_FOUND,
    summary="Get a college with all details",
)
async def get_college(
    college_id: int,
    db: Database = Depends(get_database),
) -> CollegeResponse:
    row = await college_service.get_college(db, college_id)
    return CollegeResponse(college=CollegeDetail(**row))


@admin_router.post(
    "/admin/colleges",
    status_code=201,
    response_model=CollegeCreatedResponse,
    responses=ADMIN_ERRORS,
    summary="Add a college",
)
async def create_college(
    payload: CollegePayload,
    admin: AdminClaims = Depends(require_admin),
    db: Database = Depends(get_database),
) -> CollegeCreatedResponse:
    row = await college_service.create_college(db, payload)
    return CollegeCreatedResponse(college=CollegeDetail(**row))


@admin_router.put(
    "/admin/colleges/{college_id}",
    response_model=CollegeUpdatedResponse,
    responses={**ADMIN_ERRORS, **NOT_FOUND},
    summary="Update a college",
)
async def update_college(
    college_id: int,
    payload: CollegePayload,
    admin: AdminClaims = Depends(require_admin),
    db: Database = Depends(get_database),
) -> CollegeUpdatedResponse:
    row = await college_service.update_college(db, college_id, payload)
    return CollegeUpdatedResponse(college=CollegeDetail(**row))


@admin_router.delete(
    "/admin/colleges/{college_id}",
    response_model=MessageResponse,
    responses={**ADMIN_ERRORS, **NOT_FOUND},
    summary="Delete a college",
)
async def delete_college(
    college_id: int,
    admin: AdminClaims = Depends(require_admin),
    db: Database = Depends(get_database),
) -> MessageResponse:
    await college_service.delete_college(db, college_id)
    return MessageResponse(message="College deleted successfully")
