"""
Validation for the item entry path.

A candidate is a mapping keyed by record field names (``itemName``) or attribute
names (``item_name``), or a pydantic model. Any ``id`` it carries is ignored; ids
are always assigned by the catalog.
"""

from typing import Any, Mapping, Union

from pydantic import BaseModel

from . import settings
from .exceptions import ErrorCode
from .schemas import FieldError, Item, item_field_lookup
from .utils import parse_int

Candidate = Union[Mapping[str, Any], BaseModel]


def normalize_candidate(candidate: Candidate) -> dict[str, Any]:
    """Returns the candidate keyed by `Item` attribute names, without `id` or unknown keys."""
    if isinstance(candidate, BaseModel):
        candidate = candidate.model_dump()
    lookup = item_field_lookup()
    data = {}
    for key, value in candidate.items():
        name = lookup.get(key)
        if name and name != "id":
            data[name] = value
    return data


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _stock(value: Any) -> int:
    # Entry form semantics: unreadable numbers become 0, negatives are kept for the range check.
    parsed = parse_int(value)
    return 0 if parsed is None else parsed


def validate_candidate(candidate: Candidate) -> dict[str, FieldError]:
    """Returns field name -> error for every rule the candidate breaks; empty when valid."""
    data = normalize_candidate(candidate)
    errors: dict[str, FieldError] = {}

    if not _text(data.get("item_name")).strip():
        errors["itemName"] = FieldError(
            code=ErrorCode.REQUIRED_FIELD, message="Item Name is required"
        )
    if not _text(data.get("supplier")).strip():
        errors["supplier"] = FieldError(
            code=ErrorCode.REQUIRED_FIELD, message="Supplier is required"
        )
    if _stock(data.get("target_stock")) < 0:
        errors["targetStock"] = FieldError(
            code=ErrorCode.OUT_OF_RANGE, message="Target Stock must be >= 0"
        )
    if _stock(data.get("current_stock")) < 0:
        errors["currentStock"] = FieldError(
            code=ErrorCode.OUT_OF_RANGE, message="Current Stock must be >= 0"
        )

    vendor_cycle = data.get("vendor_cycle", settings.DEFAULT_VENDOR_CYCLE)
    if vendor_cycle not in settings.VENDOR_CYCLES:
        errors["vendorCycle"] = FieldError(
            code=ErrorCode.INVALID_CHOICE,
            message=f"Vendor Cycle must be one of: {', '.join(settings.VENDOR_CYCLES)}",
        )
    next_order_day = data.get("next_order_day", settings.DEFAULT_ORDER_DAY)
    if next_order_day not in settings.ORDER_DAYS:
        errors["nextOrderDay"] = FieldError(
            code=ErrorCode.INVALID_CHOICE,
            message=f"Next Order Day must be one of: {', '.join(settings.ORDER_DAYS)}",
        )

    return errors


def build_item(candidate: Candidate, item_id: int) -> Item:
    """Builds the stored item from a candidate that already passed `validate_candidate`."""
    data = normalize_candidate(candidate)
    return Item(
        id=item_id,
        item_name=_text(data.get("item_name")),
        supplier=_text(data.get("supplier")),
        target_stock=_stock(data.get("target_stock")),
        current_stock=_stock(data.get("current_stock")),
        vendor_cycle=data.get("vendor_cycle", settings.DEFAULT_VENDOR_CYCLE),
        next_order_day=data.get("next_order_day", settings.DEFAULT_ORDER_DAY),
    )
