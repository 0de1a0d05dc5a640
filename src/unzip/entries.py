from __future__ import annotations

import zipfile
from dataclasses import dataclass
from typing import IO, Iterator


def leaf_name(full_name: str) -> str:
    """Return the last path segment of an archive member name, accepting either separator."""
    return full_name.replace("\\", "/").rsplit("/", 1)[-1]


def destination_blob_name(folder: str, entry_name: str) -> str:
    """
    Join the destination folder and an entry's leaf name into a blob path.

    Backslashes are normalized to forward slashes. An empty folder places the
    blob at the container root.
    """
    folder = folder.replace("\\", "/")
    entry_name = entry_name.replace("\\", "/")
    if not folder:
        return entry_name
    if folder.endswith("/"):
        return f"{folder}{entry_name}"
    return f"{folder}/{entry_name}"


@dataclass(frozen=True)
class ArchiveEntry:
    """One file member of a zip archive."""

    info: zipfile.ZipInfo

    @property
    def full_name(self) -> str:
        return self.info.filename

    @property
    def name(self) -> str:
        return leaf_name(self.info.filename)

    @property
    def size(self) -> int:
        return self.info.file_size

    @property
    def is_encrypted(self) -> bool:
        return bool(self.info.flag_bits & 0x1)

    @property
    def is_file(self) -> bool:
        return not self.full_name.endswith("/") and bool(self.name)

    def open(self, archive: zipfile.ZipFile) -> IO[bytes]:
        return archive.open(self.info, "r")


def iter_file_entries(archive: zipfile.ZipFile) -> Iterator[ArchiveEntry]:
    """Yield the file entries of an archive in central-directory order, skipping directories."""
    for info in archive.infolist():
        entry = ArchiveEntry(info)
        if not entry.is_file:
            continue
        yield entry
