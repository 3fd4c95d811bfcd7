"""
Medsite Backend — Customer (Lead) Service
==========================================

What:  Records interest submitted from the public site and lists it for
       admins. Leads are append-only.

The public submission echoes back only id, name, phone_number and
created_at; contact details stay admin-only.
"""

import logging
from typing import List

from sqlalchemy import insert, select

from medsite.database import Database, Row
from medsite.models.customer import Customer
from medsite.schemas.customer import CustomerPayload
from medsite.services.validation import require_fields, require_min_length

logger = logging.getLogger(__name__)

customers = Customer.__table__

MIN_PHONE_LENGTH = 10


class CustomerService:

    async def create_customer(self, db: Database, payload: CustomerPayload) -> Row:
        """
        Stores a lead.

        Raises:
            ValidationError: name or phone_number missing, or phone_number
                             shorter than 10 characters
        """
        require_fields(
            {"name": payload.name, "phone_number": payload.phone_number},
            "Name and phone number are required",
        )
        require_min_length(
            payload.phone_number,
            MIN_PHONE_LENGTH,
            field="phone_number",
            message=f"Phone number must be at least {MIN_PHONE_LENGTH} digits",
        )

        rows = await db.execute(
            insert(customers)
            .values(**payload.model_dump())
            .returning(
                customers.c.id,
                customers.c.name,
                customers.c.phone_number,
                customers.c.created_at,
            )
        )
        logger.info("Customer lead recorded: id=%s", rows[0]["id"])
        return rows[0]

    async def list_customers(self, db: Database) -> List[Row]:
        """Every lead, newest first."""
        return await db.execute(
            select(customers).order_by(customers.c.created_at.desc(), customers.c.id.desc())
        )


customer_service = CustomerService()
