import logging
from typing import Any, Callable, Iterable, Mapping, Optional

from . import settings
from .schemas import CreateResult, Item, item_field_lookup
from .utils import IdSequence, parse_stock
from .validation import Candidate, build_item, validate_candidate

logger = logging.getLogger(__name__)

ChangeListener = Callable[[list[Item]], None]


class CatalogStore:
    """
    The in-memory catalog. Items are kept in insertion order; display order is
    derived separately (see `views.build_view`). `on_change` is called with a
    snapshot after every mutation so the caller can persist it.
    """

    def __init__(
        self,
        items: Optional[Iterable[Item]] = None,
        on_change: Optional[ChangeListener] = None,
        id_sequence: Optional[IdSequence] = None,
    ):
        self._items: list[Item] = list(items or [])
        self._on_change = on_change
        self.id_sequence = id_sequence or IdSequence()

    def __len__(self) -> int:
        return len(self._items)

    def snapshot(self) -> list[Item]:
        return list(self._items)

    def create(self, candidate: Candidate) -> CreateResult:
        """Validates and appends a new item. On rejection the catalog is untouched."""
        errors = validate_candidate(candidate)
        if errors:
            logger.info(f"Item rejected: {', '.join(errors)}")
            return CreateResult(errors=errors)

        self.id_sequence.reserve(item.id for item in self._items)
        item = build_item(candidate, self.id_sequence())
        self._items.append(item)
        logger.info(f"Item '{item.item_name}' added (id={item.id}).")
        self._changed()
        return CreateResult(item=item)

    def update(self, item_id: int, patch: Mapping[str, Any]) -> Optional[Item]:
        """
        Merges the provided fields over the item with `item_id`.
        An unknown id is ignored. `id` cannot be changed, stock levels are clamped
        to 0 or more, and out-of-domain vendor cycle / order day values are dropped.
        Text fields are stored as given and not re-validated, so a blank name is kept.
        """
        for index, current in enumerate(self._items):
            if current.id == item_id:
                break
        else:
            logger.debug(f"Update ignored: no item with id={item_id}.")
            return None

        changes = self._normalize_patch(patch)
        if not changes:
            return current

        updated = current.model_copy(update=changes)
        self._items[index] = updated
        self._changed()
        return updated

    def replace_all(self, items: Iterable[Item]) -> None:
        self._items = list(items)
        logger.info(f"Catalog replaced with {len(self._items)} items.")
        self._changed()

    @staticmethod
    def _normalize_patch(patch: Mapping[str, Any]) -> dict[str, Any]:
        lookup = item_field_lookup()
        changes = {}
        for key, value in patch.items():
            name = lookup.get(key)
            if name is None or name == "id":
                continue
            if name in ("target_stock", "current_stock"):
                changes[name] = parse_stock(value)
            elif name == "vendor_cycle" and value not in settings.VENDOR_CYCLES:
                logger.warning(f"Ignoring unknown vendor cycle {value!r}.")
            elif name == "next_order_day" and value not in settings.ORDER_DAYS:
                logger.warning(f"Ignoring unknown order day {value!r}.")
            else:
                changes[name] = "" if value is None else str(value)
        return changes

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change(self.snapshot())
