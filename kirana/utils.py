import logging
import math
import re
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def get_date_suffix_for_filename() -> str:
    """Returns the current date as a YYYY-MM-DD string for filenames."""
    return datetime.now().strftime("%Y-%m-%d")


def parse_int(value: Any) -> Optional[int]:
    """
    Reads an integer the lenient way a form field does: leading digits win,
    so "12 boxes" is 12 and "3.9" is 3. Returns None when nothing numeric is found.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value)
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # digit strings past the interpreter's int conversion limit
        return None


def parse_stock(value: Any) -> int:
    """Stock levels are never negative; unreadable input counts as 0."""
    parsed = parse_int(value)
    if parsed is None or parsed < 0:
        return 0
    return parsed


class IdSequence:
    """
    Hands out millisecond-timestamp ids that only ever go up, even when several
    are requested within the same millisecond.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self._clock = clock or (lambda: int(time.time() * 1000))
        self._last = 0

    def reserve(self, ids: Iterable[int]) -> None:
        """Makes sure the next id is above every id in `ids`."""
        self._last = max([self._last, *ids])

    def __call__(self) -> int:
        next_id = max(self._clock(), self._last + 1)
        self._last = next_id
        return next_id


def read_text_file(file_path: Path) -> str:
    """
    Reads a whole file as text with an encoding fallback:
    1. UTF-8 with BOM support ('utf-8-sig').
    2. Latin-1, which can decode any byte.
    FileNotFoundError and other OS errors are left to the caller.
    """
    try:
        return file_path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError:
        logger.info(
            f"UTF-8 decoding failed for {file_path.name}. Retrying with 'latin-1'."
        )
        return file_path.read_text(encoding="latin-1")
