import logging
from pathlib import Path
from typing import Optional

import requests

from . import settings
from .csv_codec import decode_items, encode_items
from .schemas import Item, Notice
from .utils import IdSequence, read_text_file

logger = logging.getLogger(__name__)


def export_csv(items: list[Item], path: Optional[Path] = None) -> Path:
    """Writes the items, in the given order, to a CSV file (inventory.csv by default)."""
    if path is None:
        settings.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
        path = settings.OUTPUT_DIR / settings.EXPORT_FILENAME

    # newline="" keeps the "\n" terminators exactly as encoded
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(encode_items(items))
    logger.info(f"✅ Exported {len(items)} items to: {path}")
    return path


def import_csv(path: Path, id_sequence: Optional[IdSequence] = None) -> list[Item]:
    """
    Reads a CSV file fully, then decodes it.
    OSError and CsvFormatError propagate to the caller.
    """
    text = read_text_file(path)
    return decode_items(text, id_sequence=id_sequence)


def save_to_database(items: list[Item], base_url: Optional[str] = None) -> Notice:
    """
    Posts the full catalog to the remote save endpoint. Best effort: any failure
    is reported in the returned notice and nothing else changes.
    """
    base_url = base_url or settings.API_BASE_URL
    if not base_url:
        logger.warning("⚠️ API_BASE_URL not set. Skipping remote save.")
        return Notice(ok=False, message="Failed to save data to database.")

    url = base_url.rstrip("/") + settings.SAVE_ENDPOINT
    payload = [item.model_dump(mode="json", by_alias=True) for item in items]
    logger.info(f"🚀 Posting {len(payload)} items to {url}")

    try:
        response = requests.post(url, json=payload, timeout=settings.REQUEST_TIMEOUT)
    except requests.exceptions.RequestException as e:
        logger.error(f"❌ Error posting to {url}: {e}")
        return Notice(ok=False, message=f"Error saving to database: {e}")

    if not 200 <= response.status_code < 300:
        logger.error(f"❌ Remote save rejected with status {response.status_code}.")
        return Notice(ok=False, message="Failed to save data to database.")

    logger.info("✅ Inventory successfully saved to database.")
    return Notice(ok=True, message="Data saved to database successfully!")
