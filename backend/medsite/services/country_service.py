"""
Medsite Backend — Country Service
==================================

What:  CRUD over the `countries` table.
Who:   Called by the public /countries routes and the protected
       /admin/countries routes.

Pre-checks run as separate statements before each write:
    create  → name not taken
    update  → row exists (404), name not taken by another row
    delete  → row exists (404), no college carries this country's name

The unique index on `name` catches a concurrent duplicate that slips past
the pre-check; the delete check has no constraint behind it.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, func, insert, select, update

from medsite.database import Database, Row
from medsite.exceptions import ConflictError, ConstraintViolationError, NotFoundError
from medsite.models.college import College
from medsite.models.country import Country
from medsite.services.validation import require_fields

logger = logging.getLogger(__name__)

countries = Country.__table__
colleges = College.__table__

SUMMARY_COLUMNS = (
    countries.c.id,
    countries.c.name,
    countries.c.flag_image,
    countries.c.created_at,
)

REQUIRED_MESSAGE = "Name, flag_image, and body are required"
DUPLICATE_MESSAGE = "Country with this name already exists"


class CountryService:

    async def create_country(
        self,
        db: Database,
        name: Optional[str],
        flag_image: Optional[str],
        body: Optional[str],
    ) -> Row:
        """Inserts a country; returns id, name, flag_image, created_at."""
        require_fields(
            {"name": name, "flag_image": flag_image, "body": body},
            REQUIRED_MESSAGE,
        )

        existing = await db.execute(
            select(countries.c.name).where(countries.c.name == name)
        )
        if existing:
            raise ConflictError(DUPLICATE_MESSAGE, context={"name": name})

        try:
            rows = await db.execute(
                insert(countries)
                .values(name=name, flag_image=flag_image, body=body)
                .returning(*SUMMARY_COLUMNS)
            )
        except ConstraintViolationError:
            raise ConflictError(DUPLICATE_MESSAGE, context={"name": name})

        logger.info("Country created: id=%s name=%s", rows[0]["id"], name)
        return rows[0]

    async def update_country(
        self,
        db: Database,
        country_id: int,
        name: Optional[str],
        flag_image: Optional[str],
        body: Optional[str],
    ) -> Row:
        """Replaces every editable field and bumps updated_at; returns the full row."""
        require_fields(
            {"name": name, "flag_image": flag_image, "body": body},
            REQUIRED_MESSAGE,
        )
        await self._ensure_exists(db, country_id)

        conflict = await db.execute(
            select(countries.c.id)
            .where(countries.c.name == name)
            .where(countries.c.id != country_id)
        )
        if conflict:
            raise ConflictError(DUPLICATE_MESSAGE, context={"name": name})

        try:
            rows = await db.execute(
                update(countries)
                .where(countries.c.id == country_id)
                .values(name=name, flag_image=flag_image, body=body, updated_at=func.now())
                .returning(*countries.c)
            )
        except ConstraintViolationError:
            raise ConflictError(DUPLICATE_MESSAGE, context={"name": name})

        if not rows:
            # Deleted between the existence check and the update
            raise NotFoundError(resource="country", resource_id=country_id)

        logger.info("Country updated: id=%s", country_id)
        return rows[0]

    async def delete_country(self, db: Database, country_id: int) -> None:
        """
        Removes a country that no college references.

        Raises:
            NotFoundError: No such country
            ConflictError: At least one college has `country` equal to its name
        """
        country = await self._ensure_exists(db, country_id)

        referencing = await db.execute(
            select(colleges.c.id).where(colleges.c.country == country["name"]).limit(1)
        )
        if referencing:
            raise ConflictError(
                "Cannot delete country. There are colleges associated with this country.",
                context={"country_id": country_id, "name": country["name"]},
            )

        await db.execute(delete(countries).where(countries.c.id == country_id))
        logger.info("Country deleted: id=%s name=%s", country_id, country["name"])

    async def list_countries(self, db: Database) -> List[Row]:
        """All countries by name, without `body`."""
        return await db.execute(select(*SUMMARY_COLUMNS).order_by(countries.c.name))

    async def get_country(self, db: Database, country_id: int) -> Row:
        """Full row including `body` and `updated_at`."""
        rows = await db.execute(select(countries).where(countries.c.id == country_id))
        if not rows:
            raise NotFoundError(resource="country", resource_id=country_id)
        return rows[0]

    async def _ensure_exists(self, db: Database, country_id: int) -> Row:
        rows = await db.execute(
            select(countries.c.id, countries.c.name).where(countries.c.id == country_id)
        )
        if not rows:
            raise NotFoundError(resource="country", resource_id=country_id)
        return rows[0]


country_service = CountryService()
