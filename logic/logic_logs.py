from typing import Dict, Optional

from storage import Clock, parse_date_key, today_str
from .logic_exercises import EXERCISES


def render_exercise_section(date_key: str, day_logs: Optional[Dict[str, bool]]) -> str:
    lines = ["### Exercise Completion"]
    if day_logs is None:
        lines.append(f"No exercises logged for {date_key}.")
        return "\n".join(lines)

    for exercise in EXERCISES:
        mark = "✅" if day_logs.get(exercise) is True else "❌"
        lines.append(f"- {exercise} {mark}")
    return "\n".join(lines)


def render_score_section(score: int) -> str:
    lines = ["### Flower Game High Score"]
    if score > 0:
        lines.append(f"High Score: {score}")
    else:
        lines.append("No game score logged.")
    return "\n".join(lines)


def load_logs_action(date_text: str, exercise_log, score_repo):
    """
    Gradio callback: show completion flags and game score for one day.

    Returns:
        exercise markdown, score markdown, status message
    """
    date_key = parse_date_key(date_text)
    if date_key is None:
        return "", "", "Please enter a valid date as YYYY-MM-DD."

    return (
        render_exercise_section(date_key, exercise_log.day(date_key)),
        render_score_section(score_repo.get_score(date_key)),
        f"Showing logs for {date_key}.",
    )


def default_logs_date(clock: Clock) -> str:
    return today_str(clock)
