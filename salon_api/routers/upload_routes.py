# salon_api/routers/upload_routes.py

import logging

from fastapi import APIRouter, Depends, File, UploadFile

from salon_api.deps import get_media_store
from salon_api.errors import UploadFailed
from salon_api.media import MediaStore

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["upload"],
)


@router.post("/upload")
def upload_image(
    product: UploadFile = File(...),
    media: MediaStore = Depends(get_media_store),
):
    try:
        data = product.file.read()
        url = media.upload(data, filename=product.filename, content_type=product.content_type)
    except OSError as e:
        # spooled temp file or socket trouble, reported like a storage error
        logger.error(f"Upload of {product.filename!r} failed: {e}")
        raise UploadFailed(str(e))
    return {"success": True, "image_url": url}
