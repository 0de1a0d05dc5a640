"""File unzip business logic service."""
from typing import Optional

from loguru import logger

from schemas.unzip import FileUnzipRequest, TaskStatus
from src.bridge.blob_storage import AzureBlobStorage
from src.bridge.credentials import acquire_credential
from src.bridge.topic_publisher import TopicPublisher
from src.config.settings import Settings, get_settings
from src.unzip.pipeline import FileUnzipPipeline, UnzipOutcome

STARTING_STATUS = "Starting the file unzip process."
SUCCESS_STATUS = "Files unzipped and uploaded to destination blob successfully."


def error_status(message: str) -> str:
    return f"Error: {message}"


async def execute_unzip(request: FileUnzipRequest, settings: Settings) -> UnzipOutcome:
    """
    Wire the Azure clients for one request and run the pipeline.

    One credential is acquired per run and shared by the source storage, the
    destination storage and the topic publisher; all of them are closed
    before returning. A failing close is logged and does not change the
    outcome of the run.
    """
    namespace = request.servicebus_namespace or settings.servicebus_namespace

    credential = acquire_credential(settings)
    clients = [credential]
    try:
        source = AzureBlobStorage(request.source_blob_url, request.source_container_name, credential)
        clients.append(source)
        destination = AzureBlobStorage(
            request.destination_blob_url, request.destination_container_name, credential
        )
        clients.append(destination)
        publisher = TopicPublisher(
            namespace,
            request.topic_name,
            credential,
            content_type=settings.message_content_type,
        )
        pipeline = FileUnzipPipeline(source, destination, publisher)
        return await pipeline.run(request.to_job())
    finally:
        for client in reversed(clients):
            await _close_quietly(client)


async def _close_quietly(client) -> None:
    try:
        await client.close()
    except Exception as exc:
        logger.warning("Closing {} failed: {}", type(client).__name__, exc)


async def run_file_unzip(request: FileUnzipRequest, settings: Optional[Settings] = None) -> TaskStatus:
    """
    Run one unzip invocation and report its outcome as a status.

    Flow:
    1. Status starts as "Starting the file unzip process."
    2. The archive is fetched, each file uploaded and announced on the topic
    3. Status becomes the success text, or "Error: <message>" for the first failure

    Errors are never raised to the caller; they only show up in the status.

    Args:
        request: Source/destination locations, topic and correlation metadata
        settings: Optional settings override (defaults to environment)

    Returns:
        TaskStatus carrying the final status text
    """
    settings = settings or get_settings()
    status = TaskStatus(current_task_status=STARTING_STATUS)
    logger.info(
        "Unzip requested for {}/{} correlation_id={}",
        request.source_container_name,
        request.source_blob_name,
        request.correlation_id,
    )

    try:
        outcome = await execute_unzip(request, settings)
    except Exception as e:
        logger.exception("Unzip run failed before completion")
        status.current_task_status = error_status(str(e))
        return status

    if outcome.ok:
        status.current_task_status = SUCCESS_STATUS
    else:
        status.current_task_status = error_status(outcome.error.message)
    return status
