import logging
from typing import Dict

from storage import decode_json, encode_json, to_date_key

logger = logging.getLogger(__name__)

FLOWER_GAME_SCORES_KEY = "flowerGameScores"


def _is_valid_scores(data) -> bool:
    if not isinstance(data, dict):
        return False
    return all(
        isinstance(v, int) and not isinstance(v, bool) and v >= 0 for v in data.values()
    )


class GameScoreRepository:
    """Best flower-game tap count per day: { "YYYY-MM-DD": int, ... }."""

    def __init__(self, store, key: str = FLOWER_GAME_SCORES_KEY):
        self.store = store
        self.key = key

    def load_all(self) -> Dict[str, int]:
        data = decode_json(self.store.read_value(self.key), {}, self.key)
        if not _is_valid_scores(data):
            logger.warning("Stored %s has an unexpected shape, ignoring it", self.key)
            return {}
        return data

    def get_score(self, day) -> int:
        return self.load_all().get(to_date_key(day), 0)

    def record_if_higher(self, day, candidate: int) -> bool:
        """
        Store candidate for the day only if it beats the current best.
        Returns True only when the new score was written.
        """
        scores = self.load_all()
        day_key = to_date_key(day)
        if candidate <= scores.get(day_key, 0):
            return False
        scores[day_key] = int(candidate)
        if not self.store.write_value(self.key, encode_json(scores)):
            return False
        logger.info("New flower game high score for %s: %d", day_key, candidate)
        return True
