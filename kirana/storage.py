import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from . import settings
from .schemas import Item

logger = logging.getLogger(__name__)

_ITEM_LIST = TypeAdapter(list[Item])


class LocalSnapshot:
    """
    A key-value JSON file holding the catalog under one well-known key.
    Other keys in the file are preserved on save.
    """

    def __init__(self, path: Optional[Path] = None, key: str = settings.STORAGE_KEY):
        self.path = path or settings.LOCAL_STORAGE_FILE
        self.key = key

    def _read_slots(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                slots = json.load(f)
        except (OSError, ValueError) as e:
            # ValueError covers bad JSON and bytes that are not UTF-8
            logger.warning(f"Could not read local snapshot {self.path.name}: {e}")
            return {}
        return slots if isinstance(slots, dict) else {}

    def load(self) -> list[Item]:
        """Returns the saved catalog, or an empty one when nothing usable is stored."""
        raw = self._read_slots().get(self.key)
        if raw is None:
            return []
        try:
            items = _ITEM_LIST.validate_python(raw)
        except ValidationError as e:
            logger.warning(f"Saved catalog under '{self.key}' is invalid, starting empty: {e}")
            return []
        logger.info(f"Loaded {len(items)} items from {self.path.name}.")
        return items

    def save(self, items: list[Item]) -> None:
        slots = self._read_slots()
        slots[self.key] = [item.model_dump(mode="json", by_alias=True) for item in items]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(slots, f, indent=2)
