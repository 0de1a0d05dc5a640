from __future__ import annotations

import io
import sys
import zipfile
import zlib
from dataclasses import dataclass, field
from typing import List, Optional

from loguru import logger

from src.unzip.entries import ArchiveEntry, destination_blob_name, iter_file_entries
from src.unzip.errors import (
    ExtractionFailure,
    FileUnzipError,
    PublishFailure,
    UnknownFailure,
    UploadFailure,
)
from src.unzip.fetcher import fetch_archive
from src.unzip.notifications import UnzipNotification

# Raised by zipfile while opening or decompressing a member.
_ENTRY_READ_ERRORS = (zipfile.BadZipFile, zlib.error, NotImplementedError, EOFError)


@dataclass(frozen=True)
class UnzipJob:
    """Per-run parameters that are not tied to a storage or messaging client."""

    source_blob_name: str
    destination_folder: str
    correlation_id: str
    int_id: str
    event_type: str
    zip_file_name: str

    def notification_for(self, file_name: str, blob_name: str) -> UnzipNotification:
        return UnzipNotification(
            int_id=self.int_id,
            correlation_id=self.correlation_id,
            file_name=file_name,
            archive_blob_full_path=self.source_blob_name,
            zip_file_name=self.zip_file_name,
            event_type=self.event_type,
            unzip_blob_full_path=blob_name,
        )


@dataclass
class UnzipOutcome:
    """Result of one run: success, or the first error plus whatever was done before it."""

    uploaded: List[str] = field(default_factory=list)
    notifications: List[UnzipNotification] = field(default_factory=list)
    error: Optional[FileUnzipError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class FileUnzipPipeline:
    """
    Fetch a zip archive, upload each file entry and notify a topic about it.

    Entries are handled one at a time in archive order. An entry's
    notification is only sent once its upload has completed, and the first
    failing entry stops the run; blobs and messages produced before it stay
    in place.
    """

    def __init__(self, source, destination, publisher) -> None:
        self.source = source
        self.destination = destination
        self.publisher = publisher

    async def run(self, job: UnzipJob) -> UnzipOutcome:
        outcome = UnzipOutcome()
        try:
            buffer = await fetch_archive(self.source, job.source_blob_name)
            await self._extract_and_publish(buffer, job, outcome)
        except FileUnzipError as exc:
            outcome.error = exc
        except Exception as exc:
            outcome.error = UnknownFailure(str(exc) or exc.__class__.__name__)
            outcome.error.__cause__ = exc

        if outcome.ok:
            logger.info(
                "Unzipped {} file(s) from {} into {}/{}",
                len(outcome.uploaded),
                job.source_blob_name,
                self.destination.container,
                job.destination_folder,
            )
        else:
            logger.error(
                "Unzip of {} stopped after {} file(s): [{}] {}",
                job.source_blob_name,
                len(outcome.uploaded),
                outcome.error.kind,
                outcome.error.message,
            )
        return outcome

    async def _extract_and_publish(self, buffer: io.BytesIO, job: UnzipJob, outcome: UnzipOutcome) -> None:
        try:
            archive = zipfile.ZipFile(buffer, "r")
        except zipfile.BadZipFile as exc:
            raise ExtractionFailure(f"'{job.source_blob_name}' is not a valid zip archive: {exc}") from exc

        with archive:
            publisher = await self.publisher.__aenter__()
            try:
                for entry in iter_file_entries(archive):
                    await self._process_entry(archive, entry, job, publisher, outcome)
            except BaseException:
                await self._release_publisher(*sys.exc_info())
                raise
            await self.publisher.__aexit__(None, None, None)

    async def _release_publisher(self, *exc_info) -> None:
        """Close the publisher while another error is propagating; that error wins."""
        try:
            await self.publisher.__aexit__(*exc_info)
        except Exception as close_exc:
            logger.warning("Closing the topic publisher failed: {}", close_exc)

    async def _process_entry(
        self,
        archive: zipfile.ZipFile,
        entry: ArchiveEntry,
        job: UnzipJob,
        publisher,
        outcome: UnzipOutcome,
    ) -> None:
        blob_name = destination_blob_name(job.destination_folder, entry.name)

        if entry.is_encrypted:
            raise ExtractionFailure(f"Archive entry '{entry.full_name}' is encrypted")

        logger.debug("Uploading {} -> {}/{}", entry.full_name, self.destination.container, blob_name)
        try:
            with entry.open(archive) as stream:
                await self.destination.upload(blob_name, stream, length=entry.size)
        except _ENTRY_READ_ERRORS as exc:
            raise ExtractionFailure(f"Cannot read archive entry '{entry.full_name}': {exc}") from exc
        except Exception as exc:
            raise UploadFailure(
                f"Failed to upload '{entry.name}' to '{blob_name}': {exc}", entry.name, blob_name
            ) from exc
        outcome.uploaded.append(blob_name)

        notification = job.notification_for(entry.name, blob_name)
        try:
            await publisher.send(notification)
        except Exception as exc:
            raise PublishFailure(
                f"Failed to publish notification for '{blob_name}': {exc}", entry.name, blob_name
            ) from exc
        outcome.notifications.append(notification)
        logger.debug("Published {} for {}", notification.transaction_id, blob_name)
