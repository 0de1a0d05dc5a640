"""Unzip router for the blob archive extraction endpoint."""
from fastapi import APIRouter, Depends

from app.dependencies import get_app_settings
from schemas.unzip import FileUnzipRequest, TaskStatus
from services.unzip_service import run_file_unzip
from src.config.settings import Settings

router = APIRouter()


@router.post("/blob", response_model=TaskStatus)
async def unzip_blob(request: FileUnzipRequest, settings: Settings = Depends(get_app_settings)):
    """
    Extract a zip archive from Azure Blob Storage and announce each file.

    Called by the workflow action when an archive lands in the source container.

    Flow:
    1. Checks the source container and blob exist
    2. Downloads the archive into memory
    3. Uploads every file entry to {DestinationFolderName}/{file name}
    4. Sends one Service Bus message per uploaded file to TopicName

    Always responds 200; failures are reported in CurrentTaskStatus as "Error: ...".
    """
    return await run_file_unzip(request, settings)
