"""Media files (images) embedded in a workbook package."""

from __future__ import annotations

import hashlib


def _digest(contents: bytes) -> bytes:
    return hashlib.md5(contents).digest()


class MediaFile:
    """Binary media content with its suffix, MIME type and package index."""

    def __init__(
        self,
        contents: bytes | None = None,
        suffix: str = "",
        mime_type: str = "",
        file_name: str = "",
    ) -> None:
        self.file_name = file_name
        self.suffix = suffix
        self.mime_type = mime_type
        self.contents = contents if contents is not None else b""
        self.index = 0
        self.index_valid = False
        self._hash_key = _digest(contents) if contents is not None else b""

    def set(self, contents: bytes, suffix: str, mime_type: str = "") -> None:
        """Replace the content; the package index must be assigned again."""
        self.contents = contents
        self.suffix = suffix
        self.mime_type = mime_type
        self._hash_key = _digest(contents)
        self.index_valid = False

    def set_index(self, index: int) -> None:
        """Assign the position of this file among the package's media files."""
        self.index = index
        self.index_valid = True

    def hash_key(self) -> bytes:
        """Return the MD5 digest of the contents, or b"" if no content was given."""
        return self._hash_key

    def __repr__(self) -> str:
        return (
            f"MediaFile(file_name={self.file_name!r}, suffix={self.suffix!r}, "
            f"mime_type={self.mime_type!r}, size={len(self.contents)})"
        )