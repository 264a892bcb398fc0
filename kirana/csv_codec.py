"""
CSV encode/decode for the item catalog.

The decoder is deliberately naive: lines are split on ``\\n`` and values on ``,``,
so quoted fields containing commas or newlines are not supported. Malformed rows
are skipped rather than reported; only whole-file problems raise.
"""

import logging
import re
from typing import Iterable, Optional

from pydantic import ValidationError

from . import settings
from .exceptions import CsvFormatError, ErrorCode
from .schemas import Item
from .utils import IdSequence, parse_int, parse_stock

logger = logging.getLogger(__name__)

_OUTER_QUOTES = re.compile(r'^"|"$')


def _quote(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def _unquote(raw: str) -> str:
    return _OUTER_QUOTES.sub("", raw).replace('""', '"')


def encode_items(items: Iterable[Item]) -> str:
    """Serializes items in the given order. Text fields are always quoted."""
    lines = [",".join(settings.CSV_HEADERS)]
    for item in items:
        row = [
            str(item.id),
            _quote(item.item_name),
            _quote(item.supplier),
            item.vendor_cycle,
            item.next_order_day,
            str(item.target_stock),
            str(item.current_stock),
        ]
        lines.append(",".join(row))
    return "\n".join(lines)


def _read_header(text: str) -> tuple[list[str], list[str]]:
    lines = text.split("\n")
    if len(lines) < 2:
        raise CsvFormatError(ErrorCode.INVALID_FORMAT, "Invalid CSV format")

    headers = [h.strip() for h in lines[0].split(",")]
    missing = [h for h in settings.CSV_HEADERS if h not in headers]
    if missing:
        raise CsvFormatError(
            ErrorCode.MISSING_HEADERS,
            f"Missing required headers: {', '.join(missing)}",
        )
    return headers, lines[1:]


def _coerce_row(headers: list[str], values: list[str]) -> dict:
    """Coerces raw values by column name. A None id means 'assign a fresh one'."""
    row = {}
    for header, raw in zip(headers, values):
        if header == "id":
            row[header] = parse_int(raw)
        elif header in ("targetStock", "currentStock"):
            row[header] = parse_stock(raw)
        else:
            row[header] = _unquote(raw)
    return row


def _is_acceptable(row: dict) -> bool:
    return bool(
        row["itemName"]
        and row["supplier"]
        and row["vendorCycle"] in settings.VENDOR_CYCLES
        and row["nextOrderDay"] in settings.ORDER_DAYS
    )


def decode_items(text: str, id_sequence: Optional[IdSequence] = None) -> list[Item]:
    """
    Decodes CSV text into validated items.

    Raises CsvFormatError when the file has fewer than two lines or lacks one of
    the required headers. Rows with the wrong number of values, an empty name or
    supplier, or an unknown vendor cycle / order day are dropped. Rows without a
    readable id, or repeating an id seen earlier in the file, get a fresh id.
    """
    headers, body = _read_header(text)
    id_sequence = id_sequence or IdSequence()

    accepted = []
    skipped = 0
    for line_number, line in enumerate(body, start=2):
        line = line.strip()
        if not line:
            continue
        values = [v.strip() for v in line.split(",")]
        if len(values) != len(headers):
            logger.debug(f"Line {line_number}: expected {len(headers)} values, got {len(values)}. Skipping.")
            skipped += 1
            continue

        row = _coerce_row(headers, values)
        if not _is_acceptable(row):
            logger.debug(f"Line {line_number}: row failed validation. Skipping.")
            skipped += 1
            continue
        accepted.append({h: row[h] for h in settings.CSV_HEADERS})

    # Fresh ids are handed out only after every explicit id is known, so they cannot clash.
    id_sequence.reserve(row["id"] for row in accepted if row["id"] is not None)
    seen_ids = set()
    items = []
    for row in accepted:
        if row["id"] is None or row["id"] in seen_ids:
            row["id"] = id_sequence()
        seen_ids.add(row["id"])
        try:
            items.append(Item.model_validate(row))
        except ValidationError as e:
            logger.debug(f"Row {row!r} rejected by schema: {e}")
            skipped += 1

    logger.info(f"Decoded {len(items)} items from CSV ({skipped} rows skipped).")
    return items
