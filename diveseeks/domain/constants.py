"""Domain business rules and constants."""

from typing import Final

# Client contract
MAX_CLIENT_NAME_LENGTH: Final = 255
MAX_CLIENT_EMAIL_LENGTH: Final = 255

# Pagination
DEFAULT_PAGE_SIZE: Final = 10
MAX_PAGE_SIZE: Final = 100

# Violation codes shared with the presentation layer
FIELD_REQUIRED: Final = "FIELD_REQUIRED"
FIELD_INVALID_TYPE: Final = "FIELD_INVALID_TYPE"
FIELD_TOO_LONG: Final = "FIELD_TOO_LONG"
FIELD_INVALID_FORMAT: Final = "FIELD_INVALID_FORMAT"
FIELD_INVALID_VALUE: Final = "FIELD_INVALID_VALUE"
