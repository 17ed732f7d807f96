"""Abstract interface (port) for the external identity provider."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ExternalIdentity:
    """Result of exchanging an authorization code with the provider."""

    openid: str | None
    session_key: str | None = None
    unionid: str | None = None


class IdentityProvider(ABC):
    """Exchanges a one-time authorization code for an external account identity."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        ...

    @abstractmethod
    async def exchange_code(self, code: str) -> ExternalIdentity:
        """Exchange ``code`` with the provider.

        Raises UpstreamError when the provider cannot be reached or reports
        an error.
        """
        ...

    async def close(self) -> None:
        return None
