import logging
import os
import random
import time
from typing import Iterable

from fastapi import UploadFile
from PIL import Image

from core.config import settings
from schemas.media_schema import StoredUpload

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


def _normalize_filename(original_name: str) -> str:
    """Normalize the client filename.
    - Drop any directory part
    - Trim whitespace
    - Replace spaces with underscores
    - Preserve original extension
    """
    base = os.path.basename((original_name or "").replace("\\", "/")) or "file"
    name, ext = os.path.splitext(base)
    name = name.strip().replace(" ", "_") or "file"
    return f"{name}{ext}"


def generate_storage_name(original_name: str) -> str:
    """``<epoch ms>-<random>-<original name>``, unique enough for one upload root."""
    unique = f"{int(time.time() * 1000)}-{random.randint(0, 999_999_999)}"
    return f"{unique}-{_normalize_filename(original_name)}"


def _compress_image(file_path: str, size_bytes: int) -> int:
    """Re-encode an image in its own format and keep whichever file is smaller."""
    try:
        with Image.open(file_path) as img:
            ext = os.path.splitext(file_path)[1].lower()
            tmp_path = file_path + ".tmp"
            save_kwargs = {}
            if ext in (".jpg", ".jpeg"):
                if img.mode in ("RGBA", "P"):
                    img = img.convert("RGB")
                save_kwargs = {"format": "JPEG", "quality": 85, "optimize": True, "progressive": True}
            elif ext == ".png":
                save_kwargs = {"format": "PNG", "optimize": True, "compress_level": 9}
            elif ext == ".webp":
                save_kwargs = {"format": "WEBP", "quality": 85, "method": 6}

            if not save_kwargs:
                return size_bytes
            img.save(tmp_path, **save_kwargs)
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        # Unreadable or unsupported image: keep the original bytes
        logger.debug("Skipping compression of %s: %s", file_path, exc)
        return size_bytes

    new_size = os.path.getsize(tmp_path)
    if new_size < size_bytes:
        os.replace(tmp_path, file_path)
        return new_size
    os.remove(tmp_path)
    return size_bytes


def save_upload(upload: UploadFile) -> StoredUpload:
    os.makedirs(settings.MEDIA_DIR, exist_ok=True)

    filename = generate_storage_name(upload.filename or "file")
    file_path = os.path.join(settings.MEDIA_DIR, filename)

    # Stream to disk to avoid high memory usage
    size_bytes = 0
    with open(file_path, "wb") as out:
        while True:
            chunk = upload.file.read(CHUNK_SIZE)
            if not chunk:
                break
            out.write(chunk)
            size_bytes += len(chunk)

    mime = upload.content_type or "application/octet-stream"
    if mime.startswith("image/"):
        size_bytes = _compress_image(file_path, size_bytes)

    logger.info("Stored upload %s as %s (%d bytes)", upload.filename, filename, size_bytes)
    return StoredUpload(filename=filename, content_type=mime, original_name=upload.filename)


def save_uploads(uploads: Iterable[UploadFile]) -> list[StoredUpload]:
    """Store every non-empty upload, preserving arrival order.

    Browsers submit untouched file inputs as parts without a filename; those
    carry no payload and are not counted as uploads.
    """
    return [save_upload(u) for u in uploads if u is not None and u.filename]


def local_path_for(media_path: str) -> str | None:
    """Map a stored media URL path back to its file under MEDIA_DIR."""
    prefix = settings.MEDIA_URL_PATH.rstrip("/") + "/"
    if not isinstance(media_path, str) or not media_path.startswith(prefix):
        return None
    name = os.path.basename(media_path[len(prefix):])
    if not name:
        return None
    return os.path.join(settings.MEDIA_DIR, name)


def remove_media_files(media_paths: Iterable[str]) -> int:
    """Delete uploaded files behind the given media paths; returns how many were removed.

    Filesystem errors are logged and never block the caller.
    """
    removed = 0
    for media_path in media_paths:
        path = local_path_for(media_path)
        if path is None:
            continue
        try:
            if os.path.exists(path):
                os.remove(path)
                removed += 1
        except OSError as exc:
            logger.warning("Could not remove media file %s: %s", path, exc)
    return removed
