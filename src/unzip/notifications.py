"""Notification payloads sent once per extracted file."""
from __future__ import annotations

import uuid
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


def new_transaction_id() -> str:
    return "TRANS" + str(uuid.uuid4()).upper()


def new_message_id() -> str:
    return str(uuid.uuid4())


class UnzipNotification(BaseModel):
    """
    Lineage record for one extracted file.

    The body is serialized with the PascalCase aliases consumers filter on;
    the same key/value pairs travel as message application properties.
    ``message_id`` identifies the outgoing message and is not part of the body.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    int_id: str = Field(..., alias="IntId")
    transaction_id: str = Field(default_factory=new_transaction_id, alias="TransactionId")
    correlation_id: str = Field(..., alias="CorrelationId")
    file_name: str = Field(..., alias="FileName")
    archive_blob_full_path: str = Field(..., alias="ArchiveBlobFullPath")
    zip_file_name: str = Field(..., alias="ZipFileName")
    event_type: str = Field(..., alias="EventType")
    unzip_blob_full_path: str = Field(..., alias="UnzipBlobFullPath")

    message_id: str = Field(default_factory=new_message_id, exclude=True)

    def body(self) -> str:
        return self.model_dump_json(by_alias=True)

    def application_properties(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)
