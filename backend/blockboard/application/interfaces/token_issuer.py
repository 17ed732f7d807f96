"""Abstract interface (port) for signed session tokens."""

from abc import ABC, abstractmethod


class TokenIssuer(ABC):
    """Issues and verifies session tokens bound to a subject."""

    @abstractmethod
    def issue(self, subject: str) -> str:
        """Return a signed token for ``subject``."""
        ...

    @abstractmethod
    def verify(self, token: str) -> str:
        """Return the subject of a valid token.

        Raises AuthenticationError when the token is malformed, has a bad
        signature, or is expired.
        """
        ...
