"""Domain-specific exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""

    pass


class ValidationError(DomainError):
    """Raised when domain validation fails."""

    pass


class UserNotFoundError(DomainError):
    """Raised when no user exists with the requested id."""

    def __init__(self, user_id: str):
        super().__init__(f"No user with the id {user_id}")
        self.user_id = user_id
