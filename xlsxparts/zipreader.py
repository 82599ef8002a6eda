"""Read-only access to the entries of a zip package."""

from __future__ import annotations

import os
import zipfile
from typing import BinaryIO


class ZipReader:
    """Lists and reads the file entries of a zip archive given by path or binary stream."""

    def __init__(self, source: str | os.PathLike[str] | BinaryIO) -> None:
        self._archive: zipfile.ZipFile | None = None
        self._file_paths: list[str] = []
        if isinstance(source, (str, os.PathLike)) and not os.path.isfile(source):
            return
        try:
            self._archive = zipfile.ZipFile(source, "r")
        except (zipfile.BadZipFile, OSError):
            self._archive = None
            return
        self._file_paths = [info.filename for info in self._archive.infolist() if not info.is_dir()]

    def exists(self) -> bool:
        """Return True if the archive could be opened."""
        return self._archive is not None

    def file_paths(self) -> list[str]:
        """Return the paths of all file entries, in archive order, without directories."""
        return list(self._file_paths)

    def file_data(self, file_name: str) -> bytes:
        """Return the contents of an entry, or b"" if there is no such file."""
        if self._archive is None or file_name not in self._file_paths:
            return b""
        return self._archive.read(file_name)

    def close(self) -> None:
        if self._archive is not None:
            self._archive.close()
            self._archive = None

    def __enter__(self) -> ZipReader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()