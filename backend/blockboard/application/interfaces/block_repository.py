"""Abstract repository interface (port) for Block persistence."""

from abc import ABC, abstractmethod

from blockboard.domain.entities import Block


class BlockRepository(ABC):
    """Port for block persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, block_id: str) -> Block | None:
        """Retrieve a single block by its UUID."""
        ...

    @abstractmethod
    async def get_page(
        self,
        *,
        skip: int,
        limit: int,
        pid: str | None = None,
    ) -> tuple[list[Block], int]:
        """Return one page of blocks (oldest first) and the total count.

        When ``pid`` is given only blocks owned by that user are considered.
        """
        ...

    @abstractmethod
    async def create(self, block: Block) -> Block:
        """Persist a new block and return it."""
        ...

    @abstractmethod
    async def update(self, block: Block) -> Block:
        """Update an existing block."""
        ...

    @abstractmethod
    async def delete(self, block_id: str) -> int:
        """Delete a block. Returns the number of deleted rows (0 or 1)."""
        ...
