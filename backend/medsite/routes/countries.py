"""
Medsite Backend — Country Routes
=================================

Public:     GET /countries, GET /countries/{id}
Protected:  POST /admin/countries, PUT/DELETE /admin/countries/{id}
"""

from fastapi import APIRouter, Depends

from medsite.auth import AdminRoute, require_admin
from medsite.database import Database, get_database
from medsite.schemas.common import ErrorResponse, MessageResponse
from medsite.schemas.country import (
    CountryCreatedResponse,
    CountryDetail,
    CountryListResponse,
    CountryPayload,
    CountryResponse,
    CountrySummary,
    CountryUpdatedResponse,
)
from medsite.services.country_service import country_service
from medsite.services.token_service import AdminClaims

router = APIRouter(tags=["Countries"])
admin_router = APIRouter(tags=["Countries"], route_class=AdminRoute)

ADMIN_ERRORS = {
    400: {"description": "Validation error or conflict", "model": ErrorResponse},
    401: {"description": "Access token required", "model": ErrorResponse},
    403: {"description": "Invalid or expired token", "model": ErrorResponse},
}


@router.get("/countries", response_model=CountryListResponse, summary="List countries")
async def list_countries(db: Database = Depends(get_database)) -> CountryListResponse:
    rows = await country_service.list_countries(db)
    return CountryListResponse(countries=[CountrySummary(**row) for row in rows])


@router.get(
    "/countries/{country_id}",
    response_model=CountryResponse,
    responses={404: {"description": "Country not found", "model": ErrorResponse}},
    summary="Get a country with its page body",
)
async def get_country(
    country_id: int,
    db: Database = Depends(get_database),
) -> CountryResponse:
    row = await country_service.get_country(db, country_id)
    return CountryResponse(country=CountryDetail(**row))


@admin_router.post(
    "/admin/countries",
    status_code=201,
    response_model=CountryCreatedResponse,
    responses=ADMIN_ERRORS,
    summary="Create a country",
)
async def create_country(
    payload: CountryPayload,
    admin: AdminClaims = Depends(require_admin),
    db: Database = Depends(get_database),
) -> CountryCreatedResponse:
    row = await country_service.create_country(
        db, payload.name, payload.flag_image, payload.body
    )
    return CountryCreatedResponse(country=CountrySummary(**row))


@admin_router.put(
    "/admin/countries/{country_id}",
    response_model=CountryUpdatedResponse,
    responses={**ADMIN_ERRORS, 404: {"description": "Country not found", "model": ErrorResponse}},
    summary="Update a country",
)
async def update_country(
    country_id: int,
    payload: CountryPayload,
    admin: AdminClaims = Depends(require_admin),
    db: Database = Depends(get_database),
) -> CountryUpdatedResponse:
    row = await country_service.update_country(
        db, country_id, payload.name, payload.flag_image, payload.body
    )
    return CountryUpdatedResponse(country=CountryDetail(**row))


@admin_router.delete(
    "/admin/countries/{country_id}",
    response_model=MessageResponse,
    responses={**ADMIN_ERRORS, 404: {"description": "Country not found", "model": ErrorResponse}},
    summary="Delete a country no college references",
)
async def delete_country(
    country_id: int,
    admin: AdminClaims = Depends(require_admin),
    db: Database = Depends(get_database),
) -> MessageResponse:
    await country_service.delete_country(db, country_id)
    return MessageResponse(message="Country deleted successfully")
