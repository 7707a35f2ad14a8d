"""Domain-specific business rule constants."""

from typing import Final

# User field limits
MAX_NAME_LENGTH: Final = 100
MIN_AGE: Final = 0
MAX_AGE: Final = 150
