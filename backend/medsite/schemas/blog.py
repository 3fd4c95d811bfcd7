"""
Medsite Backend — Blog Schemas
===============================
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from medsite.schemas.common import RequestPayload


class BlogPayload(RequestPayload):
    """Body of POST /admin/blogs and PUT /admin/blogs/{id}."""
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None
    image_url: Optional[str] = None


class BlogSummary(BaseModel):
    id: int
    title: str
    author: str
    image_url: Optional[str] = None
    created_at: datetime


class BlogDetail(BlogSummary):
    content: str
    updated_at: datetime


class BlogCreatedResponse(BaseModel):
    message: str = "Blog created successfully"
    blog: BlogDetail


class BlogUpdatedResponse(BaseModel):
    message: str = "Blog updated successfully"
    blog: BlogDetail


class BlogListResponse(BaseModel):
    blogs: List[BlogSummary]


class BlogResponse(BaseModel):
    blog: BlogDetail
