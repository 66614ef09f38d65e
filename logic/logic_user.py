import logging

import gradio as gr

from repos.personal_info import PersonalInfo

logger = logging.getLogger(__name__)

GENDERS = ["Male", "Female"]
AGES = list(range(1, 19))


def validate_personal_info(parent_name, child_name, gender, age):
    """
    Constrain form input to the stored domains.

    Returns:
        (PersonalInfo, "") on success, (None, error message) otherwise.
    """
    if gender not in GENDERS:
        return None, f"Gender must be one of: {', '.join(GENDERS)}."
    try:
        age = int(age)
    except (TypeError, ValueError):
        return None, "Please choose an age between 1 and 18."
    if age not in AGES:
        return None, "Please choose an age between 1 and 18."

    info = PersonalInfo(
        parent_name=(parent_name or "").strip(),
        child_name=(child_name or "").strip(),
        gender=gender,
        age=age,
    )
    return info, ""


def load_info_action(info_repo):
    """Gradio callback: fill the form from local storage."""
    info = info_repo.load()
    return (
        info.parent_name,
        info.child_name,
        info.gender,
        info.age,
        "Personal information loaded from local storage.",
    )


def save_info_action(parent_name, child_name, gender, age, info_repo):
    info, error = validate_personal_info(parent_name, child_name, gender, age)
    if info is None:
        return False, error
    if not info_repo.save(info):
        return False, "Could not save personal information. Please try again."
    logger.info("Personal information saved")
    return True, "Personal information has been saved locally."


def info_edit_toggle(info_edit_state, parent_name, child_name, gender, age, info_repo):
    """
    Gradio callback for the Edit / Save button.

    Returns:
        new edit state, status message,
        updates for the four fields, the edit button and the continue button
    """
    if not info_edit_state:
        inter = gr.update(interactive=True)
        return (
            True,
            "You can now edit your personal information.",
            inter, inter, inter, inter,
            gr.update(value="Save"),
            gr.update(interactive=False),  # no leaving while editing
        )

    saved, msg = save_info_action(parent_name, child_name, gender, age, info_repo)
    if not saved:
        keep = gr.update()
        return (
            True,
            msg,
            keep, keep, keep, keep,
            gr.update(),
            gr.update(),
        )

    inter_false = gr.update(interactive=False)
    return (
        False,
        msg,
        inter_false, inter_false, inter_false, inter_false,
        gr.update(value="Edit"),
        gr.update(interactive=True),
    )
