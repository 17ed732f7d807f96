"""Domain-specific exceptions: framework-independent."""


class DomainError(Exception):
    """Base class for every error the service layer raises on purpose."""


class ValidationError(DomainError):
    """Raised when an input field is malformed or cannot be parsed."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        self.message = message
        super().__init__(message)


class AuthenticationError(DomainError):
    """Raised when the caller cannot be identified from the bearer token."""

    def __init__(self, message: str = "Invalid or missing credentials"):
        self.message = message
        super().__init__(message)


class EntityNotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(DomainError):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class UpstreamError(DomainError):
    """Raised when an external provider fails or reports an error.

    Provider-agnostic: ``status_code`` is the provider's own code when it
    reports one (e.g. a WeChat ``errcode``), otherwise the HTTP status.
    """

    def __init__(self, provider: str, status_code: int | None, message: str):
        self.provider = provider
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{provider}] {status_code}: {message}")


class StorageError(DomainError):
    """Raised when a database or object-store operation fails.

    The message is safe to show to clients; the original exception is kept
    on ``__cause__`` for server-side logging.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Storage operation failed: {operation}")
