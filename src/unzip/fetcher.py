from __future__ import annotations

import io

from loguru import logger

from src.unzip.errors import SourceContainerNotFound, SourceObjectNotFound


async def fetch_archive(storage, blob_name: str) -> io.BytesIO:
    """
    Download the source archive into memory.

    ``storage`` is bound to the source container. The container and the blob
    are each checked for existence before the single full read, and the
    returned buffer is positioned at 0 so the zip reader can seek over it.
    """
    if not await storage.container_exists():
        raise SourceContainerNotFound(storage.container)
    if not await storage.blob_exists(blob_name):
        raise SourceObjectNotFound(blob_name)

    logger.info("Downloading archive {}/{}", storage.container, blob_name)
    return await storage.download(blob_name)
