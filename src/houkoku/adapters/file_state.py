"""File-based session state adapter."""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FileStateStore:
    """
    JSON file session storage.

    Implements StateStore protocol. The whole session lives in one file
    that is overwritten on every save.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> dict | None:
        """Read the stored record. Returns None if absent or unreadable."""
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read saved session from {self.path}: {e}")
            return None
        if not isinstance(data, dict):
            logger.warning(f"Ignoring saved session in {self.path}: not a JSON object")
            return None
        return data

    def save(self, record: dict) -> None:
        """Overwrite the stored record. Raises OSError on write failure."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(record, ensure_ascii=False, indent=2), encoding="utf-8")

