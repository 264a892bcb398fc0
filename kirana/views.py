from typing import Iterable, Optional

from .calculations import is_urgent
from .schemas import Item, ViewFilter


def filter_items(items: Iterable[Item], view_filter: Optional[ViewFilter] = None) -> list[Item]:
    """Keeps the items matching every non-empty predicate of the filter."""
    view_filter = view_filter or ViewFilter()
    filtered = []
    for item in items:
        if view_filter.next_order_day and item.next_order_day != view_filter.next_order_day:
            continue
        if view_filter.vendor_cycle and item.vendor_cycle != view_filter.vendor_cycle:
            continue
        filtered.append(item)
    return filtered


def _sort_key(item: Item) -> tuple[int, str, str]:
    # Urgent bucket first, then name. Case-folding first mirrors a locale compare
    # ("apple" before "Banana"); the raw name breaks ties between case variants.
    return (0 if is_urgent(item) else 1, item.item_name.casefold(), item.item_name)


def sort_items(items: Iterable[Item]) -> list[Item]:
    """Urgent items first, each bucket ordered by name. `sorted` keeps ties stable."""
    return sorted(items, key=_sort_key)


def build_view(items: Iterable[Item], view_filter: Optional[ViewFilter] = None) -> list[Item]:
    """The list the user sees: filtered, then sorted. The input is never modified."""
    return sort_items(filter_items(items, view_filter))
