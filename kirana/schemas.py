from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ErrorCode

VendorCycle = Literal["Weekly", "Bi-Weekly"]
OrderDay = Literal["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]


class Item(BaseModel):
    """
    Defines the data contract for one stocked product line.
    Attribute names are snake_case; the aliases are the record field names used
    by the CSV file, the local snapshot and the remote save payload.
    """

    # This config lets us build items from either attribute names or aliases,
    # and dumping with by_alias=True gives back the camelCase record.
    model_config = ConfigDict(populate_by_name=True)

    id: int
    item_name: str = Field(..., alias="itemName")
    supplier: str
    target_stock: int = Field(default=0, ge=0, alias="targetStock")
    current_stock: int = Field(default=0, ge=0, alias="currentStock")
    vendor_cycle: VendorCycle = Field(..., alias="vendorCycle")
    next_order_day: OrderDay = Field(..., alias="nextOrderDay")


def item_field_lookup() -> dict[str, str]:
    """Maps both aliases and attribute names of `Item` to the attribute name."""
    lookup = {}
    for name, field in Item.model_fields.items():
        lookup[name] = name
        if field.alias:
            lookup[field.alias] = name
    return lookup


class ViewFilter(BaseModel):
    """Equality predicates for the list view. An empty string means 'All'."""

    next_order_day: str = ""
    vendor_cycle: str = ""


class FieldError(BaseModel):
    code: ErrorCode
    message: str


class CreateResult(BaseModel):
    """Outcome of the validated entry path: either an item or per-field errors."""

    item: Optional[Item] = None
    errors: dict[str, FieldError] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.item is not None

    def messages(self) -> dict[str, str]:
        return {field: error.message for field, error in self.errors.items()}


class Notice(BaseModel):
    """A user-visible message produced at the boundary where an operation finished."""

    ok: bool
    message: str
