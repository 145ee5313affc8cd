# stores/services/photos.py

"""
STORE PHOTOS

Uploaded images are stored under MEDIA_ROOT/uploads/ with a random name;
Store.photo keeps the storage name.
"""

from __future__ import annotations

import logging
import uuid

from django.core.files.storage import default_storage

from stores.services.exceptions import InvalidPhotoError

logger = logging.getLogger(__name__)

UPLOAD_DIR = "uploads"
ALLOWED_EXTENSIONS = {
    "image/jpeg": "jpeg",
    "image/png": "png",
    "image/gif": "gif",
    "image/webp": "webp",
}


def save_photo(upload) -> str:
    content_type = (getattr(upload, "content_type", "") or "").lower()
    extension = ALLOWED_EXTENSIONS.get(content_type)
    if extension is None:
        raise InvalidPhotoError("That filetype isn't allowed!")

    name = default_storage.save(f"{UPLOAD_DIR}/{uuid.uuid4()}.{extension}", upload)
    logger.info("Store photo saved", extra={"photo": name})
    return name


def delete_photo(name: str) -> None:
    default_storage.delete(name)
    logger.info("Store photo removed", extra={"photo": name})
