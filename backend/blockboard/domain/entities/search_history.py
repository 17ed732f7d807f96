"""Domain entity: one logged search event."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4


@dataclass
class SearchHistory:
    """A single search event recorded for a user."""

    uid: str | None
    history: Any = None
    id: str = field(default_factory=lambda: str(uuid4()))
    create_time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    update_time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def replace_history(self, history: Any) -> None:
        self.history = history
        self.update_time = datetime.now(timezone.utc)
