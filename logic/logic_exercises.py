import os
from typing import Dict, List, Optional

from storage import Clock, today_str

EXERCISES: List[str] = [
    "Breathing Exercise",
    "Stretching Exercise",
    "Sensory Touch Exercise",
    "Eye Contact Exercise",
]

EXERCISE_DETAILS: Dict[str, Dict] = {
    "Breathing Exercise": {
        "description": "A calming exercise to reduce stress and improve focus.",
        "steps": [
            "Find a quiet space.",
            "Sit or lie down comfortably.",
            "Close your eyes.",
            "Breathe in deeply through your nose for 4 seconds.",
            "Hold your breath for 4 seconds.",
            "Exhale slowly through your mouth for 6 seconds.",
            "Repeat for 5-10 minutes.",
        ],
        "image_name": "breathing",
    },
    "Stretching Exercise": {
        "description": "Improves flexibility and reduces muscle tension.",
        "steps": [
            "Stand with feet shoulder-width apart.",
            "Reach your arms overhead.",
            "Bend forward from your hips.",
            "Try to touch your toes (or as far as comfortable).",
            "Hold for 15-30 seconds.",
            "Repeat 2-3 times.",
        ],
        "image_name": "stretch3",
    },
    "Sensory Touch Exercise": {
        "description": "Enhances sensory awareness and exploration.",
        "steps": [
            "Gather objects with different textures (soft, rough, smooth).",
            "Close your eyes.",
            "Feel each object and describe its texture.",
            "Focus on the sensations.",
            "Repeat with each object.",
        ],
        "image_name": "sens",
    },
    "Eye Contact Exercise": {
        "description": "Improves eye contact and social interaction.",
        "steps": [
            "Sit facing a partner.",
            "Gently make eye contact.",
            "Hold eye contact for a few seconds.",
            "Take breaks and repeat.",
            "Gradually increase the duration.",
        ],
        "image_name": "eye",
    },
}

IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg")


def find_exercise_image(image_name: str, assets_dir: str) -> Optional[str]:
    """Return the first existing illustration file for image_name, if any."""
    for ext in IMAGE_EXTENSIONS:
        path = os.path.join(assets_dir, image_name + ext)
        if os.path.isfile(path):
            return path
    return None


def render_exercise_detail(exercise_name: str) -> str:
    """Markdown body for the detail page: title, description, numbered steps."""
    details = EXERCISE_DETAILS.get(exercise_name)
    if details is None:
        return f"## {exercise_name}\n\nNo details available for this exercise."

    lines = [f"## {exercise_name}", "", f"**{details['description']}**", "", "### Steps:"]
    for i, step in enumerate(details["steps"], start=1):
        lines.append(f"{i}. ✅ {step}")
    return "\n".join(lines)


def open_exercise_action(exercise_name: str, exercise_log, clock: Clock, assets_dir: str):
    """
    Gradio callback: open the detail page for one exercise.

    Returns:
        selected exercise (state), detail markdown, image path,
        completion checkbox value, status message
    """
    if exercise_name not in EXERCISE_DETAILS:
        return None, render_exercise_detail(exercise_name), None, False, "Unknown exercise."

    image_path = find_exercise_image(EXERCISE_DETAILS[exercise_name]["image_name"], assets_dir)
    completed = exercise_log.is_completed(today_str(clock), exercise_name)
    return (
        exercise_name,
        render_exercise_detail(exercise_name),
        image_path,
        completed,
        "",
    )


def toggle_completion_action(exercise_name: Optional[str], completed: bool, exercise_log, clock: Clock) -> str:
    """Gradio callback: persist the 'Mark as Completed' checkbox for today."""
    if not exercise_name:
        return "Please choose an exercise first."

    today = today_str(clock)
    if not exercise_log.set_completed(today, exercise_name, bool(completed)):
        return f"Could not save {exercise_name} for {today}. Please try again."
    if completed:
        return f"{exercise_name} marked as completed for {today}."
    return f"{exercise_name} marked as not completed for {today}."
