import logging

from kirana.logger import setup_logger
from kirana.reports import build_order_sheet, items_to_dataframe, save_order_sheet
from kirana.tracker import StockTracker

logger = logging.getLogger(__name__)


def run_process():
    """Loads the saved catalog, logs the current view and writes today's order sheet."""
    logger.info("--- Starting Kirana Stock Report ---")

    tracker = StockTracker()
    items = tracker.visible_items()
    if not items:
        logger.warning("⚠️ No items in inventory. Nothing to report.")
        return

    logger.info("\n--- Current Inventory ---")
    logger.info(items_to_dataframe(items).to_string(index=False))

    order_sheet = build_order_sheet(items)
    if order_sheet.empty:
        logger.info("✅ Everything is at or above its target stock.")
        return

    logger.info(f"\n--- {len(order_sheet)} items to reorder ---")
    save_order_sheet(order_sheet)

    logger.info("\n--- Process Finished Successfully ---")


if __name__ == "__main__":
    setup_logger()
    run_process()
