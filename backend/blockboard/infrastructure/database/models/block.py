"""SQLAlchemy ORM model for the Block entity."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from blockboard.infrastructure.database.base import Base


class BlockModel(Base):
    """ORM model: maps to the 'blocks' table.

    ``pid`` references users.id by value only (no foreign key).
    """

    __tablename__ = "blocks"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    pid: Mapped[str | None] = mapped_column(String(36), nullable=True, index=True)
    context: Mapped[str | None] = mapped_column(Text, nullable=True)
    imgs: Mapped[list | None] = mapped_column(JSON, nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    latitude_and_longitude: Mapped[str | None] = mapped_column(String(64), nullable=True)
    draft: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    create_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True,
    )
    update_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<BlockModel(id={self.id}, pid='{self.pid}')>"
