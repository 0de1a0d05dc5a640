"""Failure kinds a file unzip run can end with.

Each class carries a stable ``kind`` so callers that receive the tagged
outcome can branch on it without parsing the message text.
"""
from __future__ import annotations

from typing import Optional


class FileUnzipError(Exception):
    """Base class for every failure surfaced by an unzip run."""

    kind = "unknown"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class SourceContainerNotFound(FileUnzipError):
    kind = "source_container_not_found"

    def __init__(self, container: str) -> None:
        super().__init__(f"Source blob container '{container}' not found.")
        self.container = container


class SourceObjectNotFound(FileUnzipError):
    kind = "source_object_not_found"

    def __init__(self, blob_name: str) -> None:
        super().__init__(f"Source blob '{blob_name}' not found.")
        self.blob_name = blob_name


class ExtractionFailure(FileUnzipError):
    kind = "extraction_failure"


class EntryFailure(FileUnzipError):
    """A failure tied to one archive entry."""

    def __init__(self, message: str, entry_name: str, blob_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.entry_name = entry_name
        self.blob_name = blob_name


class UploadFailure(EntryFailure):
    kind = "upload_failure"


class PublishFailure(EntryFailure):
    kind = "publish_failure"


class UnknownFailure(FileUnzipError):
    kind = "unknown"
