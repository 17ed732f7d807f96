"""SQLAlchemy ORM model for the SearchHistory entity."""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from blockboard.infrastructure.database.base import Base


class SearchHistoryModel(Base):
    """ORM model: maps to the 'search_history' table."""

    __tablename__ = "search_history"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    uid: Mapped[str | None] = mapped_column(String(36), nullable=True, index=True)
    history: Mapped[Any] = mapped_column(JSON, nullable=True)
    create_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    update_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<SearchHistoryModel(id={self.id}, uid='{self.uid}')>"
