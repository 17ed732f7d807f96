"""Domain entity: a user-authored post with optional images."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class Block:
    """Core domain entity for a block.

    ``pid`` is the id of the owning user. It is a plain string reference,
    set once at creation and never changed.
    """

    pid: str | None
    id: str = field(default_factory=lambda: str(uuid4()))
    context: str | None = None
    imgs: list[str] | None = None
    location: str | None = None
    latitude_and_longitude: str | None = None
    draft: bool | None = None
    create_time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    update_time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def replace_content(
        self,
        *,
        context: str | None,
        imgs: list[str] | None,
        location: str | None,
        latitude_and_longitude: str | None,
        draft: bool | None,
    ) -> None:
        """Overwrite every mutable field and refresh the update_time timestamp."""
        self.context = context
        self.imgs = list(imgs) if imgs is not None else None
        self.location = location
        self.latitude_and_longitude = latitude_and_longitude
        self.draft = draft
        self.update_time = datetime.now(timezone.utc)
