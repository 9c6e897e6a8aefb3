import logging
import mimetypes
import uuid
from pathlib import Path

from taskboard.core.validation import ValidationError

logger = logging.getLogger(__name__)


def _extension(filename: str | None, content_type: str) -> str:
    suffix = Path(filename).suffix.lower() if filename else ""
    return suffix or mimetypes.guess_extension(content_type) or ""


def save_image(
    upload_dir: str | Path,
    media_url: str,
    filename: str | None,
    content_type: str | None,
    content: bytes,
    max_bytes: int | None = None,
) -> str:
    """Store an uploaded avatar under upload_dir and return the URL it is served from."""
    if not content_type or not content_type.startswith("image/"):
        raise ValidationError("image", "image must be an image file")
    if not content:
        raise ValidationError("image", "image is empty")
    if max_bytes is not None and len(content) > max_bytes:
        raise ValidationError("image", f"image is larger than {max_bytes} bytes")
    upload_dir = Path(upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    stored_name = f"{uuid.uuid4().hex}{_extension(filename, content_type)}"
    (upload_dir / stored_name).write_bytes(content)
    logger.info("Stored image %s (%d bytes)", stored_name, len(content))
    return f"{media_url.rstrip('/')}/{stored_name}"
