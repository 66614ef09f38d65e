import argparse
import logging
import sys
from datetime import date

import gradio as gr

import app_config
from landing_page import ABOUT_TXT, LANDING_TXT
from logic.logic_exercises import (
    EXERCISES,
    open_exercise_action,
    toggle_completion_action,
)
from logic.logic_game import (
    FLOWER_COUNT,
    end_game_action,
    start_game_action,
    tap_flower_action,
)
from logic.logic_logs import default_logs_date, load_logs_action
from logic.logic_user import (
    AGES,
    GENDERS,
    info_edit_toggle,
    load_info_action,
)
from repos.exercise_log import ExerciseLogRepository
from repos.game_scores import GameScoreRepository
from repos.personal_info import PersonalInfoRepository
from storage import JsonFileStore

logger = logging.getLogger(__name__)

PAGES = ["info", "exercises", "detail", "game", "logs"]


def switch_page(page_name: str):
    """Return visibility updates for all main pages based on the active page name."""
    return tuple(gr.update(visible=(page_name == p)) for p in PAGES)


def build_demo(exercise_log, score_repo, info_repo, clock=date.today, assets_dir: str = "assets"):
    """Lay out every screen and wire its callbacks to the given repositories."""

    with gr.Blocks(title="NeuroPath") as demo:
        selected_exercise = gr.State(None)
        tap_state = gr.State(0)
        high_state = gr.State(0)
        info_edit_state = gr.State(False)

        # ========== Landing ==========
        with gr.Column(visible=True) as landing_panel:
            gr.Markdown(LANDING_TXT)
            begin_btn = gr.Button("Begin Journey ➜", variant="primary")
            gr.Markdown(ABOUT_TXT)

        # ========== Main panel ==========
        with gr.Row(visible=False) as main_panel:
            # Left navigation
            with gr.Column(scale=1, min_width=180):
                gr.Markdown("### Navigation")
                btn_info = gr.Button("👤 My Info")
                btn_exercises = gr.Button("🤸 Exercises")
                btn_logs = gr.Button("📅 Logs")

            with gr.Column(scale=4):
                # Personal info
                with gr.Column(visible=True) as page_info:
                    gr.Markdown("## 👤 Personal Information")
                    info_status = gr.Markdown("")
                    gr.Markdown("### Parent/Caretaker Info")
                    parent_name = gr.Textbox(label="Name", interactive=False)
                    child_name = gr.Textbox(label="Child's Name", interactive=False)
                    gr.Markdown("### Child's Details")
                    with gr.Row():
                        gender = gr.Dropdown(
                            label="Gender", choices=GENDERS, value="Male", interactive=False
                        )
                        age = gr.Dropdown(label="Age", choices=AGES, value=3, interactive=False)
                    with gr.Row():
                        info_edit_btn = gr.Button("Edit")
                        continue_btn = gr.Button("Continue to Exercises", variant="primary")

                # Exercise list
                with gr.Column(visible=False) as page_exercises:
                    gr.Markdown("## 🤸 Exercises")
                    exercise_buttons = []
                    for name in EXERCISES:
                        exercise_buttons.append((name, gr.Button(name)))
                    gr.Markdown("### Stress Release")
                    game_btn = gr.Button("🌸 Calming Flower Game")
                    exercises_status = gr.Markdown("")

                # Exercise detail
                with gr.Column(visible=False) as page_detail:
                    detail_md = gr.Markdown("")
                    detail_image = gr.Image(
                        type="filepath", interactive=False, show_label=False
                    )
                    completed_box = gr.Checkbox(label="Mark as Completed", value=False)
                    detail_status = gr.Markdown("")
                    detail_back_btn = gr.Button("← Back to exercises")

                # Flower game
                with gr.Column(visible=False) as page_game:
                    gr.Markdown("## 🌸 Calming Flower Game")
                    gr.Markdown("Tap the flowers to reduce stress and relax!")
                    flower_buttons = []
                    per_row = FLOWER_COUNT // 2
                    for _ in range(2):
                        with gr.Row():
                            for _ in range(per_row):
                                flower_buttons.append(gr.Button("🌸", size="lg"))
                    tapped_md = gr.Markdown("### Flowers Tapped: 0")
                    high_md = gr.Markdown("**Today's High Score: 0**")
                    celebrate_md = gr.Markdown("")
                    end_game_btn = gr.Button("End Game", variant="stop")

                # Logs
                with gr.Column(visible=False) as page_logs:
                    gr.Markdown("## 📅 Logs & Progress")
                    with gr.Row():
                        logs_date = gr.Textbox(label="Select Date (YYYY-MM-DD)")
                        logs_btn = gr.Button("Show")
                    logs_status = gr.Markdown("")
                    logs_exercises_md = gr.Markdown("")
                    logs_score_md = gr.Markdown("")

        pages = [page_info, page_exercises, page_detail, page_game, page_logs]
        info_fields = [parent_name, child_name, gender, age]

        # ====== Event bindings ======

        begin_btn.click(
            lambda: (gr.update(visible=False), gr.update(visible=True)),
            inputs=None,
            outputs=[landing_panel, main_panel],
        ).then(
            lambda: load_info_action(info_repo),
            inputs=None,
            outputs=info_fields + [info_status],
        )

        # Navigation
        btn_info.click(
            lambda: switch_page("info"), inputs=None, outputs=pages
        ).then(
            lambda: load_info_action(info_repo),
            inputs=None,
            outputs=info_fields + [info_status],
        )
        btn_exercises.click(lambda: switch_page("exercises"), inputs=None, outputs=pages)
        continue_btn.click(lambda: switch_page("exercises"), inputs=None, outputs=pages)

        btn_logs.click(
            lambda: switch_page("logs"), inputs=None, outputs=pages
        ).then(
            lambda: default_logs_date(clock), inputs=None, outputs=[logs_date]
        ).then(
            lambda d: load_logs_action(d, exercise_log, score_repo),
            inputs=[logs_date],
            outputs=[logs_exercises_md, logs_score_md, logs_status],
        )

        # Personal info edit / save
        info_edit_btn.click(
            lambda s, p, c, g, a: info_edit_toggle(s, p, c, g, a, info_repo),
            inputs=[info_edit_state] + info_fields,
            outputs=[info_edit_state, info_status] + info_fields + [info_edit_btn, continue_btn],
        )

        # Exercise list -> detail
        def _make_open(exercise_name):
            def _open():
                return open_exercise_action(exercise_name, exercise_log, clock, assets_dir)
            return _open

        for name, btn in exercise_buttons:
            btn.click(
                lambda: switch_page("detail"), inputs=None, outputs=pages
            ).then(
                _make_open(name),
                inputs=None,
                outputs=[selected_exercise, detail_md, detail_image, completed_box, detail_status],
            )

        # Only user edits persist; programmatic value changes on open do not.
        completed_box.input(
            lambda e, v: toggle_completion_action(e, v, exercise_log, clock),
            inputs=[selected_exercise, completed_box],
            outputs=[detail_status],
        )
        detail_back_btn.click(lambda: switch_page("exercises"), inputs=None, outputs=pages)

        # Flower game
        game_outputs = [tap_state, high_state, tapped_md, high_md, celebrate_md]
        game_btn.click(
            lambda: switch_page("game"), inputs=None, outputs=pages
        ).then(
            lambda: start_game_action(score_repo, clock),
            inputs=None,
            outputs=game_outputs,
        )
        for flower in flower_buttons:
            flower.click(
                tap_flower_action,
                inputs=[tap_state, high_state],
                outputs=game_outputs,
            )
        end_game_btn.click(
            lambda t: end_game_action(t, score_repo, clock),
            inputs=[tap_state],
            outputs=[exercises_status],
        ).then(lambda: switch_page("exercises"), inputs=None, outputs=pages)

        # Logs
        logs_btn.click(
            lambda d: load_logs_action(d, exercise_log, score_repo),
            inputs=[logs_date],
            outputs=[logs_exercises_md, logs_score_md, logs_status],
        )
        logs_date.submit(
            lambda d: load_logs_action(d, exercise_log, score_repo),
            inputs=[logs_date],
            outputs=[logs_exercises_md, logs_score_md, logs_status],
        )

    # One handler at a time: repositories do unguarded read-modify-write.
    demo.queue(default_concurrency_limit=1)
    return demo


def main(argv=None):
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--data-dir", type=str, default=None)
    args, _unknown = parser.parse_known_args(sys.argv[1:] if argv is None else argv)

    logging.basicConfig(
        level=getattr(logging, app_config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = JsonFileStore(args.data_dir or app_config.DATA_DIR)
    store.ensure_base_dir()
    logger.info("Using local storage at %s", store.base_dir)

    demo = build_demo(
        ExerciseLogRepository(store),
        GameScoreRepository(store),
        PersonalInfoRepository(store),
        clock=date.today,
        assets_dir=app_config.ASSETS_DIR,
    )
    demo.launch(
        server_name=app_config.SERVER_NAME,
        server_port=app_config.SERVER_PORT,
        share=app_config.SHARE,
    )


if __name__ == "__main__":
    main()
