"""Component for the final score and the leaderboard."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtWidgets import QLabel, QListWidget, QPushButton, QVBoxLayout, QWidget

from quiz_battle.constants.ui_constants import (
    LEADERBOARD_HEADING,
    LEADERBOARD_LOADING,
    PLAY_AGAIN_BUTTON,
    RESULTS_HEADING,
)
from quiz_battle.core.display_model import ResultsView
from quiz_battle.core.quiz_controller import QuizController
from quiz_battle.styling.styles import Styles


class ResultsPanel(QWidget):
    """UI component for the results stage."""

    def __init__(
        self,
        controller: QuizController,
        on_state_changed: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.controller = controller
        self.on_state_changed = on_state_changed
        self._rows: tuple[str, ...] = ()

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        heading = QLabel(RESULTS_HEADING, self)
        heading.setStyleSheet(Styles.get_heading_style())
        layout.addWidget(heading)

        self.score_label = QLabel(self)
        layout.addWidget(self.score_label)

        layout.addWidget(QLabel(LEADERBOARD_HEADING, self))

        self.loading_label = QLabel(LEADERBOARD_LOADING, self)
        layout.addWidget(self.loading_label)

        self.leaderboard_list = QListWidget(self)
        layout.addWidget(self.leaderboard_list, stretch=1)

        self.empty_label = QLabel(self)
        layout.addWidget(self.empty_label)

        self.play_again_button = QPushButton(PLAY_AGAIN_BUTTON, self)
        self.play_again_button.clicked.connect(self._handle_play_again)
        layout.addWidget(self.play_again_button)

    def _handle_play_again(self) -> None:
        self.controller.restart()
        self.on_state_changed()

    def render(self, view: ResultsView) -> None:
        self.score_label.setText(view.score_text)
        self.loading_label.setVisible(view.loading)

        if view.leaderboard_rows != self._rows:
            self._rows = view.leaderboard_rows
            self.leaderboard_list.clear()
            for rank, row in enumerate(view.leaderboard_rows, start=1):
                self.leaderboard_list.addItem(f"{rank}. {row}")

        show_list = not view.loading and bool(view.leaderboard_rows)
        self.leaderboard_list.setVisible(show_list)
        self.empty_label.setVisible(not view.loading and view.empty_message is not None)
        self.empty_label.setText(view.empty_message or "")
