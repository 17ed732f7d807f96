"""Domain entity: an account bound to an external app identifier."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass
class User:
    """Core domain entity for a user account.

    ``app_id`` is the identifier issued by the external identity provider
    (the WeChat ``openid``) and is the natural key used at login.
    """

    app_id: str
    id: str = field(default_factory=lambda: str(uuid4()))
    name: str | None = None
    sex: int | None = None
    birthday: datetime | None = None
    phone: str | None = None
    email: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def replace_profile(
        self,
        *,
        name: str | None,
        sex: int | None,
        email: str | None,
        phone: str | None,
        birthday: datetime | None,
    ) -> None:
        """Overwrite every profile field and refresh the updated_at timestamp."""
        self.name = name
        self.sex = sex
        self.email = email
        self.phone = phone
        self.birthday = birthday
        self.updated_at = datetime.now(timezone.utc)
