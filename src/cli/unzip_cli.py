from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Optional, Sequence

from schemas.unzip import FileUnzipRequest
from services.unzip_service import SUCCESS_STATUS, run_file_unzip
from src.config.logging_config import configure_logging
from src.config.settings import get_settings

_ARGUMENTS = [
    ("--source-blob-url", "source_blob_url", "Source storage account URL"),
    ("--destination-blob-url", "destination_blob_url", "Destination storage account URL"),
    ("--source-container", "source_container_name", "Container holding the archive"),
    ("--destination-container", "destination_container_name", "Container receiving extracted files"),
    ("--source-blob", "source_blob_name", "Archive blob name"),
    ("--destination-folder", "destination_folder_name", "Folder prefix for extracted files"),
    ("--topic", "topic_name", "Service Bus topic for notifications"),
    ("--correlation-id", "correlation_id", "Correlation id copied onto every message"),
    ("--int-id", "int_id", "Integration id copied onto every message"),
    ("--event-type", "event_type", "Event type copied onto every message"),
    ("--zip-file-name", "zip_file_name", "Original archive file name"),
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Unzip a blob archive, upload its files and notify a Service Bus topic."
    )
    for flag, dest, help_text in _ARGUMENTS:
        parser.add_argument(flag, dest=dest, required=True, help=help_text)
    parser.add_argument(
        "--servicebus-namespace",
        dest="servicebus_namespace",
        default=None,
        help="Fully qualified Service Bus namespace (defaults to SERVICEBUS_FULLY_QUALIFIED_NAMESPACE)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    request = FileUnzipRequest(**vars(args))
    status = asyncio.run(run_file_unzip(request, settings))
    print(status.current_task_status)
    return 0 if status.current_task_status == SUCCESS_STATUS else 1


if __name__ == "__main__":
    sys.exit(main())
