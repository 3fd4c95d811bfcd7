"""
Medsite Backend — Customer Lead Routes
=======================================

What:  POST /customers takes a lead from the public site without
       authentication; GET /admin/customers lists every lead for admins.
"""

from fastapi import APIRouter, Depends

from medsite.auth import AdminRoute, require_admin
from medsite.database import Database, get_database
from medsite.schemas.common import ErrorResponse
from medsite.schemas.customer import (
    CustomerCreatedResponse,
    CustomerListResponse,
    CustomerPayload,
    CustomerReceipt,
    CustomerRecord,
)
from medsite.services.customer_service import customer_service
from medsite.services.token_service import AdminClaims

router = APIRouter(tags=["Customers"])
admin_router = APIRouter(tags=["Customers"], route_class=AdminRoute)


@router.post(
    "/customers",
    status_code=201,
    response_model=CustomerCreatedResponse,
    responses={400: {"description": "Missing name or short phone number", "model": ErrorResponse}},
    summary="Register interest in a college",
)
async def create_customer(
    payload: CustomerPayload,
    db: Database = Depends(get_database),
) -> CustomerCreatedResponse:
    row = await customer_service.create_customer(db, payload)
    return CustomerCreatedResponse(customer=CustomerReceipt(**row))


@admin_router.get(
    "/admin/customers",
    response_model=CustomerListResponse,
    responses={
        401: {"description": "Access token required", "model": ErrorResponse},
        403: {"description": "Invalid or expired token", "model": ErrorResponse},
    },
    summary="List every lead, newest first",
)
async def list_customers(
    admin: AdminClaims = Depends(require_admin),
    db: Database = Depends(get_database),
) -> CustomerListResponse:
    rows = await customer_service.list_customers(db)
    return CustomerListResponse(customers=[CustomerRecord(**row) for row in rows])
