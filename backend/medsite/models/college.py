"""
Medsite Backend — College Model
================================

What:  The `colleges` table.

Column groups:
    Summary (list view):  id, logo_link, name, country, state, intake,
                          year_of_establishment, recognition, duration, medium
    Narrative (detail):   intro, course_fees, admission_eligibility,
                          benefits, campus_info

`country` matches Country.name at write time; it is not a foreign key.
"""

from typing import Optional

from sqlalchemy import Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from medsite.database import Base


class College(Base):
    __tablename__ = "colleges"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    country: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    state: Mapped[str] = mapped_column(String(255), nullable=False)
    year_of_establishment: Mapped[int] = mapped_column(Integer, nullable=False)

    logo_link: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    intake: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    duration: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    recognition: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    medium: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    intro: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    course_fees: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    admission_eligibility: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    benefits: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    campus_info: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    __table_args__ = (
        UniqueConstraint("name", "country", name="uq_colleges_name_country"),
    )

    def __repr__(self) -> str:
        return f"<College(id={self.id}, name='{self.name}', country='{self.country}')>"
