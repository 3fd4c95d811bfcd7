"""
Medsite Backend — Country Model
================================

What:  The `countries` table. Colleges reference a country by *name*
       (free text, no foreign key), so a country cannot be deleted while any
       college row carries its name; that rule is checked in CountryService.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from medsite.database import Base


class Country(Base):
    __tablename__ = "countries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    flag_image: Mapped[str] = mapped_column(Text, nullable=False)

    # Long-form page content; omitted from the list view
    body: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<Country(id={self.id}, name='{self.name}')>"
