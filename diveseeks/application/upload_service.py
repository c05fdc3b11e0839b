from dataclasses import dataclass
from pathlib import Path
from typing import Final
from uuid import uuid4

from ..config import AppConfig
from ..constants import IMAGE_EXTENSIONS
from ..domain.exceptions import FileTooLargeError, UnsupportedFileTypeError
from ..logging_config import get_logger
from ..logging_utils import log_file_stored

logger: Final = get_logger(__name__)


@dataclass(frozen=True)
class StoredFile:
    filename: str
    original_name: str | None
    content_type: str
    size: int
    path: Path


def check_upload(config: AppConfig, content_type: str | None, size: int) -> str:
    """Validate an upload against the configured limits.

    Returns:
        The accepted content type

    Raises:
        UnsupportedFileTypeError: If the content type is not an accepted image type
        FileTooLargeError: If size exceeds ``config.max_file_size``
    """
    if content_type is None or content_type not in IMAGE_EXTENSIONS:
        raise UnsupportedFileTypeError(content_type)
    if size > config.max_file_size:
        raise FileTooLargeError(size, config.max_file_size)
    return content_type


def store_upload(
    config: AppConfig,
    data: bytes,
    content_type: str | None,
    original_name: str | None = None,
) -> StoredFile:
    """Write an uploaded file under ``config.upload_dest`` with a generated name."""
    checked_type = check_upload(config, content_type, len(data))

    # The suffix follows the checked content type, never the client file name
    filename = f"{uuid4().hex}{IMAGE_EXTENSIONS[checked_type]}"

    upload_dir = config.upload_path
    upload_dir.mkdir(parents=True, exist_ok=True)
    path = upload_dir / filename
    path.write_bytes(data)

    log_file_stored(filename, len(data), checked_type)
    logger.debug("Upload written", path=str(path))

    return StoredFile(
        filename=filename,
        original_name=original_name,
        content_type=checked_type,
        size=len(data),
        path=path,
    )
