"""Domain-level exception hierarchy."""


class DomainError(Exception):
    """Base exception for service-layer errors."""

    def __init__(self, message: str = "Domain error") -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(DomainError):
    """Raised when client-supplied data cannot be turned into a query."""


class EmptyUpdateError(BadRequestError):
    """Raised when a partial update carries no fields."""

    def __init__(self, message: str = "No data") -> None:
        super().__init__(message)


class InvalidRangeError(BadRequestError):
    """Raised when a lower filter bound exceeds its upper bound."""


class UnknownFilterKeyError(BadRequestError):
    """Raised when a search filter names a key that has no clause."""

    def __init__(self, key: str) -> None:
        super().__init__(f"{key} is not a valid filter")
        self.key = key


class NotFoundError(DomainError):
    """Raised when a requested resource cannot be located."""


class ConflictError(DomainError):
    """Raised when a unique constraint or business rule is violated."""


class DuplicateEntityError(ConflictError):
    """Raised when creating a record whose natural key already exists."""


class ForbiddenError(DomainError):
    """Raised when a user attempts an operation they are not allowed to perform."""


class UnauthorizedError(DomainError):
    """Raised when authentication credentials are invalid."""
