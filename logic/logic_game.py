from storage import Clock, today_str

FLOWER_COUNT = 6


def _tapped_text(tap_count: int) -> str:
    return f"### Flowers Tapped: {tap_count}"


def _high_score_text(high_score: int) -> str:
    return f"**Today's High Score: {high_score}**"


def start_game_action(score_repo, clock: Clock):
    """
    Gradio callback: reset the session and load today's best score.

    Returns:
        tap_count, high_score, tapped markdown, high score markdown, celebration markdown
    """
    high_score = score_repo.get_score(today_str(clock))
    return 0, high_score, _tapped_text(0), _high_score_text(high_score), ""


def tap_flower_action(tap_count: int, high_score: int):
    """
    Gradio callback: one flower tapped.

    The displayed high score follows the tap count as soon as it is beaten;
    nothing is persisted until the game ends.
    """
    tap_count = int(tap_count or 0) + 1
    high_score = int(high_score or 0)
    celebration = ""
    if tap_count > high_score:
        high_score = tap_count
        celebration = "🎆 ✨ New high score! ✨ 🎆"
    return tap_count, high_score, _tapped_text(tap_count), _high_score_text(high_score), celebration


def end_game_action(tap_count: int, score_repo, clock: Clock) -> str:
    """Gradio callback: save the session's taps if they beat today's best."""
    tap_count = int(tap_count or 0)
    today = today_str(clock)
    best = score_repo.get_score(today)
    if score_repo.record_if_higher(today, tap_count):
        return f"Great job! New high score for {today}: {tap_count}."
    if tap_count > best:
        return f"Could not save your score of {tap_count}. Please try again."
    return f"Game over. You tapped {tap_count} flower(s)."
