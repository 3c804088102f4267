"""Application entry point for Quiz Battle."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from quiz_battle.core.app_factory import build_controller, build_leaderboard_service, build_question_bank
from quiz_battle.core.quiz_importer import QuizImportError
from quiz_battle.ui.quiz_main_window import QuizMainWindow
from quiz_battle.utils.app_config import AppConfig
from quiz_battle.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, wire the leaderboard, and launch the Qt UI."""
    config = AppConfig.from_env()
    logger = configure_logging(config.log_level)
    logger.info("Starting Quiz Battle…")

    try:
        question_bank = build_question_bank(config)
    except (OSError, QuizImportError) as exc:
        logger.error("Unable to load questions from %s: %s", config.questions_file, exc)
        sys.exit(1)

    leaderboard = build_leaderboard_service(config)
    controller = build_controller(config, leaderboard, question_bank=question_bank)
    controller.initialize()

    app = QApplication(sys.argv)
    window = QuizMainWindow(controller=controller, theme=config.theme)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
