import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from . import data_handler
from .exceptions import CsvFormatError, ErrorCode
from .schemas import CreateResult, Item, Notice, ViewFilter
from .storage import LocalSnapshot
from .store import CatalogStore
from .validation import Candidate
from .views import build_view

logger = logging.getLogger(__name__)

_IMPORT_FAILURES = {
    ErrorCode.INVALID_FORMAT: "Invalid CSV format",
    ErrorCode.MISSING_HEADERS: "Missing required headers",
}


class StockTracker:
    """
    Front door for the stock tracker. Owns the catalog, keeps the local snapshot
    in sync with it and turns every failure into a `Notice` or `CreateResult`
    instead of raising.
    """

    def __init__(
        self,
        local_snapshot: Optional[LocalSnapshot] = None,
        api_base_url: Optional[str] = None,
    ):
        self.local_snapshot = local_snapshot or LocalSnapshot()
        self.api_base_url = api_base_url
        self.filters = ViewFilter()
        self.store = CatalogStore(
            items=self.local_snapshot.load(), on_change=self._persist
        )

    # --- Catalog ---

    @property
    def items(self) -> list[Item]:
        """All items in insertion order."""
        return self.store.snapshot()

    def add_item(self, candidate: Candidate) -> CreateResult:
        result = self.store.create(candidate)
        if result.ok:
            logger.info(f'Item "{result.item.item_name}" added successfully!')
        return result

    def update_item(self, item_id: int, patch: Mapping[str, Any]) -> Optional[Item]:
        return self.store.update(item_id, patch)

    def update_stock(self, item_id: int, current_stock: Any) -> Optional[Item]:
        return self.store.update(item_id, {"currentStock": current_stock})

    # --- View ---

    def set_filters(self, next_order_day: str = "", vendor_cycle: str = "") -> None:
        self.filters = ViewFilter(next_order_day=next_order_day, vendor_cycle=vendor_cycle)

    def visible_items(self) -> list[Item]:
        return build_view(self.store.snapshot(), self.filters)

    # --- Import / Export ---

    def export_csv(self, path: Optional[Path] = None) -> Notice:
        """Exports the current view (filtered and sorted), not the whole catalog."""
        items = self.visible_items()
        try:
            written = data_handler.export_csv(items, path)
        except OSError as e:
            logger.error(f"❌ Could not write CSV export: {e}")
            return Notice(ok=False, message=f"Could not export CSV: {e}")
        return Notice(ok=True, message=f"Exported {len(items)} items to {written.name}")

    def import_csv(self, path: Path) -> Notice:
        """Replaces the whole catalog with the accepted rows of the file."""
        try:
            items = data_handler.import_csv(path, id_sequence=self.store.id_sequence)
        except CsvFormatError as e:
            logger.warning(f"⚠️ CSV import failed: {e.message}")
            return Notice(ok=False, message=_IMPORT_FAILURES[e.code])
        except OSError as e:
            logger.error(f"❌ Could not read {path}: {e}")
            return Notice(ok=False, message=f"Could not read file: {e}")

        self.store.replace_all(items)
        return Notice(ok=True, message=f"Imported {len(items)} items")

    # --- Remote Save ---

    def save_to_database(self) -> Notice:
        return data_handler.save_to_database(self.store.snapshot(), self.api_base_url)

    def _persist(self, items: list[Item]) -> None:
        try:
            self.local_snapshot.save(items)
        except OSError as e:
            logger.error(f"❌ Could not write local snapshot: {e}")
