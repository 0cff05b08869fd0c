"""Multipart form data types."""

import mimetypes
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Attachment:
    """An attachment to a multipart form."""

    name: str  # form field name
    data: bytes
    filepath: Path | None = None
    content_type: str | None = None

    @classmethod
    def from_path(cls, path: str | Path) -> "Attachment":
        """Read a local file into an attachment named ``file``."""
        path = Path(path)
        content_type, _ = mimetypes.guess_type(path.name)
        return cls(name="file", data=path.read_bytes(), filepath=path, content_type=content_type)

    def to_part(self) -> tuple:
        """The (filename, data[, content_type]) tuple ``requests`` expects in ``files=``."""
        filename = self.filepath.name if self.filepath else None
        if self.content_type:
            return (filename, self.data, self.content_type)
        return (filename, self.data)
