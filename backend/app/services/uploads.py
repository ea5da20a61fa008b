"""Profile picture storage on local disk, served back under /uploads."""

import logging
import os
import secrets
import time
from pathlib import Path

from fastapi import UploadFile

from backend.app.core.exceptions import ServiceError
from backend.app.core.settings import get_settings

logger = logging.getLogger(__name__)

UPLOAD_URL_PREFIX = "/uploads"


class UploadRejectedError(ServiceError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


def build_filename(original_name: str | None) -> str:
    ext = Path(original_name or "").suffix.lower()
    return f"profile-{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{ext}"


async def save_profile_picture(upload: UploadFile) -> dict:
    settings = get_settings()
    if not (upload.content_type or "").startswith("image/"):
        raise UploadRejectedError("Only image files are allowed")

    content = await upload.read(settings.max_upload_bytes + 1)
    if len(content) > settings.max_upload_bytes:
        raise UploadRejectedError(f"File too large; limit is {settings.max_upload_bytes // (1024 * 1024)}MB")
    if not content:
        raise UploadRejectedError("Uploaded file is empty")

    os.makedirs(settings.upload_dir, exist_ok=True)
    filename = build_filename(upload.filename)
    with open(os.path.join(settings.upload_dir, filename), "wb") as handle:
        handle.write(content)
    logger.info("Stored profile picture %s (%s bytes)", filename, len(content))
    return {"filename": filename, "url": f"{UPLOAD_URL_PREFIX}/{filename}"}
