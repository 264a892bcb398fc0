import logging
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from . import settings, utils
from .calculations import order_quantity
from .schemas import Item
from .views import build_view

logger = logging.getLogger(__name__)

ORDER_SHEET_COLUMNS = [
    "Item",
    "Supplier",
    "Vendor Cycle",
    "Next Order Day",
    "Target Stock",
    "Current Stock",
    "Order Quantity",
]


def items_to_dataframe(items: Iterable[Item]) -> pd.DataFrame:
    """One row per item, in the given order, with the order quantity alongside."""
    rows = [
        {
            "Item": item.item_name,
            "Supplier": item.supplier,
            "Vendor Cycle": item.vendor_cycle,
            "Next Order Day": item.next_order_day,
            "Target Stock": item.target_stock,
            "Current Stock": item.current_stock,
            "Order Quantity": order_quantity(item),
        }
        for item in items
    ]
    return pd.DataFrame(rows, columns=ORDER_SHEET_COLUMNS)


def build_order_sheet(items: Iterable[Item]) -> pd.DataFrame:
    """
    The shopping list for the next orders: only items below their par level,
    in view order.
    """
    df = items_to_dataframe(build_view(items))
    return df[df["Order Quantity"] > 0].reset_index(drop=True)


def save_order_sheet(df: pd.DataFrame, output_dir: Optional[Path] = None) -> Path:
    """Saves the order sheet to a dated CSV, and to JSON when configured."""
    output_dir = output_dir or settings.OUTPUT_DIR
    output_dir.mkdir(parents=True, exist_ok=True)
    date_suffix = utils.get_date_suffix_for_filename()

    csv_path = output_dir / f"{settings.ORDER_SHEET_FILENAME_BASE}_{date_suffix}.csv"
    df.to_csv(csv_path, index=False)
    logger.info(f"✅ Order sheet saved to: {csv_path}")

    if settings.SAVE_JSON_OUTPUT:
        json_path = csv_path.with_suffix(".json")
        df.to_json(json_path, orient="records", indent=2)
        logger.info(f"✅ JSON output saved to: {json_path}")
    else:
        logger.info("INFO: Skipping JSON file save as per configuration.")

    return csv_path
