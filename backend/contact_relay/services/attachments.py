"""
Attachment collection for uploaded form files.

Each upload is read fully into memory and then closed. Reads run
concurrently; the returned list keeps the upload order.
"""

import asyncio
import logging
from typing import Optional

from starlette.datastructures import UploadFile

from contact_relay.config import DEFAULT_ATTACHMENT_CONTENT_TYPE
from contact_relay.models.submission import Attachment
from contact_relay.services.form_fields import FileValue

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "upload"


async def _read_upload(
    upload: UploadFile,
    default_content_type: str,
    log_uploads: bool,
) -> Attachment:
    if log_uploads:
        logger.info(
            "Processing uploaded file: name=%r mimetype=%r",
            upload.filename,
            upload.content_type,
        )
    try:
        content = await upload.read()
    finally:
        await upload.close()

    return Attachment(
        filename=upload.filename or DEFAULT_FILENAME,
        content=content,
        content_type=upload.content_type or default_content_type,
    )


async def collect_attachments(
    uploaded: Optional[FileValue],
    default_content_type: str = DEFAULT_ATTACHMENT_CONTENT_TYPE,
    log_uploads: bool = False,
) -> list[Attachment]:
    """
    Turn the ``images`` form value into a list of attachments.

    Args:
        uploaded: None, a single UploadFile, or a list of them.
        default_content_type: MIME type for uploads that declare none.
        log_uploads: Log each file's name and declared type before reading.

    Returns:
        One Attachment per upload, in upload order. Empty when nothing was
        uploaded.
    """
    if uploaded is None:
        return []
    uploads = uploaded if isinstance(uploaded, list) else [uploaded]

    return list(
        await asyncio.gather(
            *(_read_upload(u, default_content_type, log_uploads) for u in uploads)
        )
    )
