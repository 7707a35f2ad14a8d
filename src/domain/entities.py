"""Pure domain entities without infrastructure dependencies."""

from dataclasses import dataclass

from .constants import MAX_AGE, MAX_NAME_LENGTH, MIN_AGE
from .exceptions import ValidationError


def validate_user_name(name: str, field: str = "name") -> None:
    """Validate a user name according to domain rules.

    Args:
        name: The name to validate
        field: Field being validated (for error messages)

    Raises:
        ValidationError: If name is empty, too long, or contains control characters
    """
    if not name or not name.strip():
        raise ValidationError(f"User {field} cannot be empty")

    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"User {field} cannot be longer than {MAX_NAME_LENGTH} characters"
        )

    for char in name:
        if ord(char) < 32 or ord(char) == 127:
            raise ValidationError(
                f"User {field} cannot contain newlines, tabs, "
                + "or other control characters"
            )


@dataclass
class User:
    """A user held by the user sub-router."""

    id: str
    first_name: str
    last_name: str
    age: int

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        validate_user_name(self.first_name, "first name")
        validate_user_name(self.last_name, "last name")

        if not MIN_AGE <= self.age <= MAX_AGE:
            raise ValidationError(
                f"User age must be between {MIN_AGE} and {MAX_AGE}"
            )
