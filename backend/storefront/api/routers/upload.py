# storefront/api/routers/upload.py
import logging
import re
import secrets
import time
from pathlib import Path

from fastapi import APIRouter, File, Request, UploadFile

from storefront.core.errors import NotFoundError, ValidationError

logger = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="/upload", tags=["upload"])

ALLOWED_IMAGE_TYPES = {"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"}
_EXTENSION = re.compile(r"\.[A-Za-z0-9]{1,10}")


def upload_root(request: Request) -> Path:
    """Directory holding uploaded files; created on first use."""
    root = Path(request.app.state.settings.upload_dir)
    root.mkdir(parents=True, exist_ok=True)
    return root


def _stored_name(original: str | None) -> str:
    # image-<ms timestamp>-<random><ext>
    ext = Path(original or "").suffix
    if not _EXTENSION.fullmatch(ext):
        ext = ""
    return f"image-{int(time.time() * 1000)}-{secrets.randbelow(10 ** 9)}{ext.lower()}"


@router.post("/image")
async def upload_image(request: Request, image: UploadFile | None = File(default=None)):
    """
    Store one image sent as the multipart field ``image``.

    Returns:
        dict: {success, url, filename, size}; the file is served at ``url``

    Error responses:
        - 400: No file, not an image type, or larger than UPLOAD_MAX_BYTES
    """
    if image is None:
        raise ValidationError("No file uploaded")
    if image.content_type not in ALLOWED_IMAGE_TYPES:
        raise ValidationError("Only image files can be uploaded")

    limit = request.app.state.settings.upload_max_bytes
    data = await image.read(limit + 1)
    if len(data) > limit:
        raise ValidationError(f"File is larger than {limit} bytes")

    filename = _stored_name(image.filename)
    (upload_root(request) / filename).write_bytes(data)
    logger.info("[upload] stored %s (%d bytes)", filename, len(data))
    return {"success": True, "url": f"/uploads/{filename}", "filename": filename, "size": len(data)}


@router.delete("/image/{filename}")
async def delete_image(filename: str, request: Request):
    """
    Remove an uploaded file.

    Error responses:
        - 404: No such file (names with path separators never match)
    """
    if "/" in filename or "\\" in filename or filename in ("", ".", ".."):
        raise NotFoundError("File not found")
    target = upload_root(request) / filename
    if not target.is_file():
        raise NotFoundError("File not found")
    target.unlink()
    logger.info("[upload] deleted %s", filename)
    return {"success": True, "message": "File deleted"}
