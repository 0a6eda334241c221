"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when a write would violate a uniqueness constraint."""

    def __init__(self, entity_type: str, field: str, value: object):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class EntityValidationError(Exception):
    """Raised when a write is missing required fields or carries invalid values."""

    def __init__(self, entity_type: str, fields: list[str], reason: str = "required"):
        self.entity_type = entity_type
        self.fields = fields
        self.reason = reason
        super().__init__(
            f"{entity_type}: invalid value for {', '.join(fields)} ({reason})"
        )


class StorageError(Exception):
    """Raised when the persistence medium fails for any other reason.

    The driver exception is kept as ``__cause__`` for diagnostics.
    """

    def __init__(self, operation: str, entity_type: str, detail: str = ""):
        self.operation = operation
        self.entity_type = entity_type
        self.detail = detail
        message = f"Storage failure during {operation} on {entity_type}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
