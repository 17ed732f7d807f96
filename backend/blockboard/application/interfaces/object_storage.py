"""Abstract object storage interface (port)."""

from abc import ABC, abstractmethod


class ObjectStorage(ABC):
    """Port for a bucket of named binary objects.

    Implementations raise StorageError for any failure of the backing store.
    """

    @abstractmethod
    async def ensure_bucket(self) -> None:
        """Create the configured bucket when it does not exist yet."""
        ...

    @abstractmethod
    async def put(self, key: str, content: bytes, content_type: str | None = None) -> str:
        """Store ``content`` under ``key`` (overwriting) and return its public URL."""
        ...

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Whether an object is currently stored under ``key``."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove the object stored under ``key``. Missing keys are not an error."""
        ...

    @abstractmethod
    def public_url(self, key: str) -> str:
        """Public retrieval URL for ``key``."""
        ...

    async def close(self) -> None:
        """Release any client held by the implementation."""
        return None
