"""
Announcer Backend — Announcement SQLAlchemy Model
==================================================

What:  ORM model for the `announcements` table.
Who:   Queried by AnnouncementService; created by initialize_store() and
       the Alembic migration.

Table layout (MySQL):
    CREATE TABLE announcements (
        id INT AUTO_INCREMENT PRIMARY KEY,
        message VARCHAR(255) NOT NULL
    );

The application never writes to this table at request time. Rows are
seeded once when the store is initialized.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from announcer.database import Base


class Announcement(Base):
    """A single announcement: store-assigned integer id plus a short message."""

    __tablename__ = "announcements"

    # Assigned by the store on insert; never reused
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    message: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Announcement(id={self.id}, message='{self.message}')>"
