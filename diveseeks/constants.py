"""Infrastructure and technical constants."""

from typing import Final

# Configuration defaults
DEFAULT_PORT: Final = 3000
DEFAULT_NODE_ENV: Final = "development"
DEFAULT_MAX_FILE_SIZE: Final = 10 * 1024 * 1024  # 10MB
DEFAULT_UPLOAD_DEST: Final = "./uploads"
DEFAULT_THROTTLE_TTL: Final = 60
DEFAULT_THROTTLE_LIMIT: Final = 10

DEFAULT_HOST: Final = "0.0.0.0"
PRODUCTION_ENV: Final = "production"

# File upload: accepted content types and their stored file suffix
IMAGE_EXTENSIONS: Final = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}

LOG_FILE_NAME: Final = "diveseeks.log"
