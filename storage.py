import json
import logging
import os
import re
import tempfile
from datetime import date, datetime
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

Clock = Callable[[], date]

_DATE_KEY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_STORE_KEY_RE = re.compile(r"^[A-Za-z0-9_]+$")


class StoreError(ValueError):
    """Raised for store keys that cannot name a file."""


def format_date_key(day: date) -> str:
    """Return the zero-padded YYYY-MM-DD key for a calendar day.

    Aware datetimes are converted to local time first; naive ones are
    taken as already local.
    """
    if isinstance(day, datetime):
        if day.tzinfo is not None:
            day = day.astimezone()
        day = day.date()
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def parse_date_key(text: Optional[str]) -> Optional[str]:
    """Validate a user-entered YYYY-MM-DD string, None if it is not a real day."""
    if not text:
        return None
    text = text.strip()
    if not _DATE_KEY_RE.match(text):
        return None
    try:
        parsed = datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        return None
    return format_date_key(parsed)


def today_str(clock: Clock = date.today) -> str:
    """Return today's date key (YYYY-MM-DD) according to the given clock."""
    return format_date_key(clock())


def to_date_key(day) -> str:
    """Accept either a date or an already formatted key."""
    if isinstance(day, date):
        return format_date_key(day)
    return str(day)


def decode_json(raw: Optional[str], default, key: str = ""):
    """Decode JSON text, returning default when missing or undecodable."""
    if raw is None or raw == "":
        return default
    try:
        return json.loads(raw)
    except (ValueError, RecursionError):
        logger.warning("Stored value for %r is not valid JSON, using default", key)
        return default


def encode_json(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2, sort_keys=True)


class JsonFileStore:
    """
    Process-wide key-value text store: one file per key under base_dir.

    Values are read and written whole. Writes go through a temp file and
    os.replace so a crash never leaves a half-written document behind.
    """

    def __init__(self, base_dir: str):
        self.base_dir = base_dir

    def ensure_base_dir(self) -> None:
        os.makedirs(self.base_dir, exist_ok=True)

    def path_for(self, key: str) -> str:
        if not _STORE_KEY_RE.match(key or ""):
            raise StoreError(f"Invalid store key: {key!r}")
        return os.path.join(self.base_dir, f"{key}.json")

    def read_value(self, key: str) -> Optional[str]:
        """Return the raw text stored under key, or None on a miss."""
        path = self.path_for(key)
        if not os.path.exists(path):
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError):
            logger.warning("Could not read %s, treating as missing", path, exc_info=True)
            return None

    def write_value(self, key: str, text: str) -> bool:
        """Overwrite the value under key. Returns False if the write failed."""
        path = self.path_for(key)
        try:
            self.ensure_base_dir()
            fd, tmp = tempfile.mkstemp(prefix=f".tmp_{key}_", dir=self.base_dir, text=True)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp, path)
        except OSError:
            logger.error("Failed to write %s", path, exc_info=True)
            return False
        return True
