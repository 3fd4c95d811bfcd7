"""
Medsite Backend — Blog Routes
==============================

Public:     GET /blogs, GET /blogs/{id}
Protected:  POST /admin/blogs, PUT/DELETE /admin/blogs/{id}
"""

from fastapi import APIRouter, Depends

from medsite.auth import AdminRoute, require_admin
from medsite.database import Database, get_database
from medsite.schemas.blog import (
    BlogCreatedResponse,
    BlogDetail,
    BlogListResponse,
    BlogPayload,
    BlogResponse,
    BlogSummary,
    BlogUpdatedResponse,
)
from medsite.schemas.common import ErrorResponse, MessageResponse
from medsite.services.blog_service import blog_service
from medsite.services.token_service import AdminClaims

router = APIRouter(tags=["Blogs"])
admin_router = APIRouter(tags=["Blogs"], route_class=AdminRoute)

ADMIN_ERRORS = {
    400: {"description": "Missing title, content or author", "model": ErrorResponse},
    401: {"description": "Access token required", "model": ErrorResponse},
    403: {"description": "Invalid or expired token", "model": ErrorResponse},
}
NOT_FOUND = {404: {"description": "Blog not found", "model": ErrorResponse}}


@router.get("/blogs", response_model=BlogListResponse, summary="List blog posts, newest first")
async def list_blogs(db: Database = Depends(get_database)) -> BlogListResponse:
    rows = await blog_service.list_blogs(db)
    return BlogListResponse(blogs=[BlogSummary(**row) for row in rows])


@router.get("/blogs/{blog_id}", response_model=BlogResponse, responses=NOT_FOUND)
async def get_blog(blog_id: int, db: Database = Depends(get_database)) -> BlogResponse:
    row = await blog_service.get_blog(db, blog_id)
    return BlogResponse(blog=BlogDetail(**row))


@admin_router.post(
    "/admin/blogs",
    status_code=201,
    response_model=BlogCreatedResponse,
    responses=ADMIN_ERRORS,
)
async def create_blog(
    payload: BlogPayload,
    admin: AdminClaims = Depends(require_admin),
    db: Database = Depends(get_database),
) -> BlogCreatedResponse:
    row = await blog_service.create_blog(
        db, payload.title, payload.content, payload.author, payload.image_url
    )
    return BlogCreatedResponse(blog=BlogDetail(**row))


@admin_router.put(
    "/admin/blogs/{blog_id}",
    response_model=BlogUpdatedResponse,
    responses={**ADMIN_ERRORS, **NOT_FOUND},
)
async def update_blog(
    blog_id: int,
    payload: BlogPayload,
    admin: AdminClaims = Depends(require_admin),
    db: Database = Depends(get_database),
) -> BlogUpdatedResponse:
    row = await blog_service.update_blog(
        db, blog_id, payload.title, payload.content, payload.author, payload.image_url
    )
    return BlogUpdatedResponse(blog=BlogDetail(**row))


@admin_router.delete(
    "/admin/blogs/{blog_id}",
    response_model=MessageResponse,
    responses={**ADMIN_ERRORS, **NOT_FOUND},
)
async def delete_blog(
    blog_id: int,
    admin: AdminClaims = Depends(require_admin),
    db: Database = Depends(get_database),
) -> MessageResponse:
    await blog_service.delete_blog(db, blog_id)
    return MessageResponse(message="Blog deleted successfully")
