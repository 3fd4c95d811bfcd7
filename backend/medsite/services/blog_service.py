"""
Medsite Backend — Blog Service
===============================

What:  CRUD over the `blogs` table. Title, content and author are required;
       image_url is optional. No uniqueness rules.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, func, insert, select, update

from medsite.database import Database, Row
from medsite.exceptions import NotFoundError
from medsite.models.blog import Blog
from medsite.services.validation import require_fields

logger = logging.getLogger(__name__)

blogs = Blog.__table__

REQUIRED_MESSAGE = "Title, content, and author are required"


class BlogService:

    async def create_blog(
        self,
        db: Database,
        title: Optional[str],
        content: Optional[str],
        author: Optional[str],
        image_url: Optional[str] = None,
    ) -> Row:
        require_fields(
            {"title": title, "content": content, "author": author},
            REQUIRED_MESSAGE,
        )
        rows = await db.execute(
            insert(blogs)
            .values(title=title, content=content, author=author, image_url=image_url)
            .returning(*blogs.c)
        )
        logger.info("Blog created: id=%s", rows[0]["id"])
        return rows[0]

    async def update_blog(
        self,
        db: Database,
        blog_id: int,
        title: Optional[str],
        content: Optional[str],
        author: Optional[str],
        image_url: Optional[str] = None,
    ) -> Row:
        require_fields(
            {"title": title, "content": content, "author": author},
            REQUIRED_MESSAGE,
        )
        await self._ensure_exists(db, blog_id)

        rows = await db.execute(
            update(blogs)
            .where(blogs.c.id == blog_id)
            .values(
                title=title,
                content=content,
                author=author,
                image_url=image_url,
                updated_at=func.now(),
            )
            .returning(*blogs.c)
        )
        if not rows:
            raise NotFoundError(resource="blog", resource_id=blog_id)

        logger.info("Blog updated: id=%s", blog_id)
        return rows[0]

    async def delete_blog(self, db: Database, blog_id: int) -> None:
        await self._ensure_exists(db, blog_id)
        await db.execute(delete(blogs).where(blogs.c.id == blog_id))
        logger.info("Blog deleted: id=%s", blog_id)

    async def list_blogs(self, db: Database) -> List[Row]:
        """Newest first, without the post content."""
        return await db.execute(
            select(
                blogs.c.id,
                blogs.c.title,
                blogs.c.author,
                blogs.c.image_url,
                blogs.c.created_at,
            ).order_by(blogs.c.created_at.desc(), blogs.c.id.desc())
        )

    async def get_blog(self, db: Database, blog_id: int) -> Row:
        rows = await db.execute(select(blogs).where(blogs.c.id == blog_id))
        if not rows:
            raise NotFoundError(resource="blog", resource_id=blog_id)
        return rows[0]

    async def _ensure_exists(self, db: Database, blog_id: int) -> None:
        rows = await db.execute(select(blogs.c.id).where(blogs.c.id == blog_id))
        if not rows:
            raise NotFoundError(resource="blog", resource_id=blog_id)


blog_service = BlogService()
