"""
Medsite Backend — Admin Model
==============================

What:  The `admins` table: accounts allowed to call the protected routes.
How:   Created through POST /admin/admins; never updated or deleted in-band.
       `password` holds the bcrypt hash, never the plaintext.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from medsite.database import Base


class Admin(Base):
    __tablename__ = "admins"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Unique index backs the username pre-check against concurrent signups
    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="bcrypt hash (cost 10)",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<Admin(id={self.id}, username='{self.username}')>"
