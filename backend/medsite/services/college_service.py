"""
Medsite Backend — College Service
==================================

What:  CRUD over the `colleges` table.

Write rules (checked with SELECTs before the write):
    - name, country, state, year_of_establishment are required
    - `country` must equal an existing Country.name ("Country does not exist")
    - (name, country) is unique across colleges

Order of checks on update: required fields → row exists (404) → country
exists → (name, country) free among the other rows.
"""

import logging
from typing import List

from sqlalchemy import delete, insert, select, update

from medsite.database import Database, Row
from medsite.exceptions import ConflictError, ConstraintViolationError, NotFoundError
from medsite.models.college import College
from medsite.models.country import Country
from medsite.schemas.college import CollegePayload
from medsite.services.validation import require_fields

logger = logging.getLogger(__name__)

colleges = College.__table__
countries = Country.__table__

# Card fields for the listing page; narrative columns stay on the detail view
SUMMARY_COLUMNS = (
    colleges.c.id,
    colleges.c.logo_link,
    colleges.c.name,
    colleges.c.country,
    colleges.c.state,
    colleges.c.intake,
    colleges.c.year_of_establishment,
    colleges.c.recognition,
    colleges.c.duration,
    colleges.c.medium,
)

DUPLICATE_MESSAGE = "College with this name and country already exists"


class CollegeService:

    async def create_college(self, db: Database, payload: CollegePayload) -> Row:
        """Inserts a college and returns the full row."""
        self._validate(payload)
        await self._ensure_country_exists(db, payload.country)

        duplicate = await db.execute(
            select(colleges.c.id)
            .where(colleges.c.name == payload.name)
            .where(colleges.c.country == payload.country)
        )
        if duplicate:
            raise ConflictError(DUPLICATE_MESSAGE, context={"name": payload.name})

        try:
            rows = await db.execute(
                insert(colleges)
                .values(**payload.column_values())
                .returning(*colleges.c)
            )
        except ConstraintViolationError:
            raise ConflictError(DUPLICATE_MESSAGE, context={"name": payload.name})

        logger.info(
            "College created: id=%s name=%s country=%s",
            rows[0]["id"], payload.name, payload.country,
        )
        return rows[0]

    async def update_college(
        self, db: Database, college_id: int, payload: CollegePayload
    ) -> Row:
        """Replaces every column of an existing college; returns the full row."""
        self._validate(payload)
        await self._ensure_exists(db, college_id)
        await self._ensure_country_exists(db, payload.country)

        conflict = await db.execute(
            select(colleges.c.id)
            .where(colleges.c.name == payload.name)
            .where(colleges.c.country == payload.country)
            .where(colleges.c.id != college_id)
        )
        if conflict:
            raise ConflictError(DUPLICATE_MESSAGE, context={"name": payload.name})

        try:
            rows = await db.execute(
                update(colleges)
                .where(colleges.c.id == college_id)
                .values(**payload.column_values())
                .returning(*colleges.c)
            )
        except ConstraintViolationError:
            raise ConflictError(DUPLICATE_MESSAGE, context={"name": payload.name})

        if not rows:
            raise NotFoundError(resource="college", resource_id=college_id)

        logger.info("College updated: id=%s", college_id)
        return rows[0]

    async def delete_college(self, db: Database, college_id: int) -> None:
        await self._ensure_exists(db, college_id)
        await db.execute(delete(colleges).where(colleges.c.id == college_id))
        logger.info("College deleted: id=%s", college_id)

    async def list_colleges(self, db: Database) -> List[Row]:
        """Summary rows ordered by name."""
        return await db.execute(select(*SUMMARY_COLUMNS).order_by(colleges.c.name))

    async def get_college(self, db: Database, college_id: int) -> Row:
        rows = await db.execute(select(colleges).where(colleges.c.id == college_id))
        if not rows:
            raise NotFoundError(resource="college", resource_id=college_id)
        return rows[0]

    def _validate(self, payload: CollegePayload) -> None:
        require_fields(
            {
                "name": payload.name,
                "country": payload.country,
                "state": payload.state,
                "year_of_establishment": payload.year_of_establishment,
            },
            "name, country, state, and year_of_establishment are required",
        )

    async def _ensure_exists(self, db: Database, college_id: int) -> None:
        rows = await db.execute(select(colleges.c.id).where(colleges.c.id == college_id))
        if not rows:
            raise NotFoundError(resource="college", resource_id=college_id)

    async def _ensure_country_exists(self, db: Database, country: str) -> None:
        rows = await db.execute(select(countries.c.name).where(countries.c.name == country))
        if not rows:
            raise ConflictError("Country does not exist", context={"country": country})


college_service = CollegeService()
