import logging
from typing import Dict, Optional

from storage import decode_json, encode_json, to_date_key

logger = logging.getLogger(__name__)

DAILY_LOGS_KEY = "dailyLogs"

ExerciseCompletionLog = Dict[str, Dict[str, bool]]


def _is_valid_log(data) -> bool:
    if not isinstance(data, dict):
        return False
    for day_key, day in data.items():
        if not isinstance(day_key, str) or not isinstance(day, dict):
            return False
        if not all(isinstance(v, bool) for v in day.values()):
            return False
    return True


class ExerciseLogRepository:
    """
    Per-day exercise completion flags.

    Structure: { "YYYY-MM-DD": { "<exercise name>": bool, ... }, ... }
    The whole document is read and rewritten on every change.
    """

    def __init__(self, store, key: str = DAILY_LOGS_KEY):
        self.store = store
        self.key = key

    def load_all(self) -> ExerciseCompletionLog:
        data = decode_json(self.store.read_value(self.key), {}, self.key)
        if not _is_valid_log(data):
            logger.warning("Stored %s has an unexpected shape, ignoring it", self.key)
            return {}
        return data

    def day(self, day) -> Optional[Dict[str, bool]]:
        """Return the recorded flags for one day, or None if nothing was logged."""
        return self.load_all().get(to_date_key(day))

    def is_completed(self, day, exercise_name: str) -> bool:
        return bool(self.load_all().get(to_date_key(day), {}).get(exercise_name, False))

    def set_completed(self, day, exercise_name: str, value: bool) -> bool:
        """Returns False if the log could not be written."""
        logs = self.load_all()
        day_key = to_date_key(day)
        logs.setdefault(day_key, {})[exercise_name] = bool(value)
        if not self.store.write_value(self.key, encode_json(logs)):
            return False
        logger.debug("Set %s on %s to %s", exercise_name, day_key, bool(value))
        return True
