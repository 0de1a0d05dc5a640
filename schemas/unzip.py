"""File unzip request/response models."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.unzip.pipeline import UnzipJob


class FileUnzipRequest(BaseModel):
    """Parameters for one unzip run.

    Field names follow the workflow action that triggers the run
    (``SourceBlobUrl``, ``TopicName``, ...); snake_case names are accepted too.
    ``ServiceBusNamespace`` overrides the configured namespace for this run.
    """
    model_config = ConfigDict(populate_by_name=True)

    source_blob_url: str = Field(..., alias="SourceBlobUrl")
    destination_blob_url: str = Field(..., alias="DestinationBlobUrl")
    source_container_name: str = Field(..., alias="SourceContainerName")
    destination_container_name: str = Field(..., alias="DestinationContainerName")
    source_blob_name: str = Field(..., alias="SourceBlobName")
    destination_folder_name: str = Field(..., alias="DestinationFolderName")
    topic_name: str = Field(..., alias="TopicName")
    correlation_id: str = Field(..., alias="CorrelationId")
    int_id: str = Field(..., alias="IntId")
    event_type: str = Field(..., alias="EventType")
    zip_file_name: str = Field(..., alias="ZipFileName")
    servicebus_namespace: Optional[str] = Field(None, alias="ServiceBusNamespace")

    def to_job(self) -> UnzipJob:
        return UnzipJob(
            source_blob_name=self.source_blob_name,
            destination_folder=self.destination_folder_name,
            correlation_id=self.correlation_id,
            int_id=self.int_id,
            event_type=self.event_type,
            zip_file_name=self.zip_file_name,
        )


class TaskStatus(BaseModel):
    """Single human-readable status returned for every run."""
    model_config = ConfigDict(populate_by_name=True)

    current_task_status: str = Field(..., alias="CurrentTaskStatus")
