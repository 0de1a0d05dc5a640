from __future__ import annotations

import io
from typing import IO, Any, Optional

from azure.storage.blob.aio import BlobServiceClient
from loguru import logger


class AzureBlobStorage:
    """
    Async access to a single Azure Blob container.

    Bound to one account URL and container for the lifetime of an unzip run,
    so the same handle is reused for every blob read or written.
    """

    def __init__(self, account_url: str, container: str, credential: Any) -> None:
        self.account_url = account_url
        self.container = container
        self.service = BlobServiceClient(account_url=account_url, credential=credential)
        self.client = self.service.get_container_client(container)

    async def container_exists(self) -> bool:
        return await self.client.exists()

    async def blob_exists(self, blob_name: str) -> bool:
        return await self.client.get_blob_client(blob_name).exists()

    async def download(self, blob_name: str) -> io.BytesIO:
        """Stream a blob fully into memory and return the buffer rewound to the start."""
        blob_client = self.client.get_blob_client(blob_name)
        downloader = await blob_client.download_blob()
        buffer = io.BytesIO()
        await downloader.readinto(buffer)
        buffer.seek(0)
        logger.debug(
            "Downloaded {}/{} ({} bytes)", self.container, blob_name, buffer.getbuffer().nbytes
        )
        return buffer

    async def upload(self, blob_name: str, data: IO[bytes], length: Optional[int] = None) -> None:
        blob_client = self.client.get_blob_client(blob_name)
        await blob_client.upload_blob(data, length=length, overwrite=True)

    async def close(self) -> None:
        await self.service.close()

    async def __aenter__(self) -> "AzureBlobStorage":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
