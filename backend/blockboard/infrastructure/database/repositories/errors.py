"""Translation of SQLAlchemy failures into domain StorageError."""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from blockboard.domain.exceptions import StorageError


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Re-raise any SQLAlchemyError inside the block as StorageError(operation)."""
    try:
        yield
    except SQLAlchemyError as exc:
        raise StorageError(operation) from exc
