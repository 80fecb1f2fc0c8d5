"""In-memory file store for loaded templates."""

from dataclasses import dataclass, field

from src.loader.constants import KEY_SEPARATOR
from src.loader.parsers import Document


def normalize_key(path: str) -> str:
    """Replace Windows path separators with the canonical key separator."""
    return path.replace("\\", KEY_SEPARATOR)


@dataclass
class FileStore:
    """Parsed documents and raw bytes keyed by logical file key.

    Attributes:
        templates: Parsed document per key.
        files: Raw file content per key.
    """

    templates: dict[str, Document] = field(default_factory=dict)
    files: dict[str, bytes] = field(default_factory=dict)

    def put(self, key: str, document: Document, content: bytes) -> None:
        """Store a file, replacing any previous entry with the same key."""
        self.templates[key] = document
        self.files[key] = content

    def __len__(self) -> int:
        return len(self.templates)

    def keys(self) -> list[str]:
        """Return stored keys in sorted order."""
        return sorted(self.templates)
