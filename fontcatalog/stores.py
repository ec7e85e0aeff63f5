"""
Storage interfaces used by maintenance flows.

The pipeline never touches storage itself; callers inject a BinaryStore for
original font bytes and a MetadataStore for persisted records.
"""

from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Protocol, Tuple

from .utils import find_font_file


class BinaryStore(Protocol):
    def fetch(self, filename: str) -> bytes:
        """Return the stored bytes for ``filename``; raise KeyError if absent."""
        ...


class MetadataStore(Protocol):
    def items(self) -> Iterator[Tuple[str, Dict[str, Any]]]:
        """Yield (font id, stored record) pairs."""
        ...

    def update(self, font_id: str, changes: Dict[str, Any]) -> bool:
        """Merge ``changes`` into the stored record; return success."""
        ...


class InMemoryBinaryStore:
    def __init__(self, files: Optional[Dict[str, bytes]] = None):
        self.files: Dict[str, bytes] = dict(files or {})

    def put(self, filename: str, data: bytes):
        self.files[filename] = data

    def fetch(self, filename: str) -> bytes:
        return self.files[filename]


class DirectoryBinaryStore:
    """Serve font bytes from a local directory."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def fetch(self, filename: str) -> bytes:
        path = find_font_file(self.directory, filename)
        if path is None:
            raise KeyError(filename)
        return path.read_bytes()


class InMemoryMetadataStore:
    def __init__(self, records: Optional[Dict[str, Dict[str, Any]]] = None):
        self.records: Dict[str, Dict[str, Any]] = {
            font_id: dict(record) for font_id, record in (records or {}).items()
        }

    def items(self) -> Iterator[Tuple[str, Dict[str, Any]]]:
        for font_id, record in list(self.records.items()):
            yield font_id, dict(record)

    def update(self, font_id: str, changes: Dict[str, Any]) -> bool:
        if font_id not in self.records:
            return False
        self.records[font_id].update(changes)
        return True
