"""Qt main window switching between the registration, quiz and results panels."""

from __future__ import annotations

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from quiz_battle.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from quiz_battle.constants.ui_constants import (
    ABOUT_BUTTON,
    BUSY_MESSAGE,
    HELP_BUTTON,
    SNAPSHOT_REFRESH_INTERVAL_MS,
    WINDOW_TITLE,
)
from quiz_battle.core.display_model import (
    QuestionView,
    RegistrationView,
    ResultsView,
    build_display_model,
)
from quiz_battle.core.models import QuizSnapshot, Stage
from quiz_battle.core.quiz_controller import QuizController
from quiz_battle.styling.color_palette import Theme
from quiz_battle.styling.styles import Styles
from quiz_battle.ui.components.question_panel import QuestionPanel
from quiz_battle.ui.components.registration_panel import RegistrationPanel
from quiz_battle.ui.components.results_panel import ResultsPanel
from quiz_battle.ui.dialog_helpers import show_info


class QuizMainWindow(QMainWindow):
    """Main Qt window rendering the controller snapshot for each stage."""

    def __init__(
        self,
        controller: QuizController,
        font_size: int = 14,
        theme: Theme = Theme.LIGHT,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumWidth(560)

        self.controller = controller
        self.theme = theme
        self._last_snapshot: QuizSnapshot | None = None

        self._build_ui()
        self.question_panel.apply_font_size(font_size)
        self.setStyleSheet(Styles.get_main_window_style(self.theme))
        self._configure_refresh_timer()
        self.refresh()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_header_buttons(root_layout)

        self.stage_stack = QStackedWidget(self)
        self.registration_panel = RegistrationPanel(self.controller, self.refresh, self)
        self.question_panel = QuestionPanel(self.controller, self.refresh, self, theme=self.theme)
        self.results_panel = ResultsPanel(self.controller, self.refresh, self)
        self.stage_stack.addWidget(self.registration_panel)
        self.stage_stack.addWidget(self.question_panel)
        self.stage_stack.addWidget(self.results_panel)
        root_layout.addWidget(self.stage_stack, stretch=1)

        self.busy_label = QLabel(BUSY_MESSAGE, self)
        self.busy_label.setVisible(False)
        root_layout.addWidget(self.busy_label)

        self.error_label = QLabel(self)
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(Styles.get_error_style(self.theme))
        self.error_label.setVisible(False)
        root_layout.addWidget(self.error_label)

    def _build_header_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.help_button = QPushButton(HELP_BUTTON, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.about_button = QPushButton(ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        layout.addLayout(button_row)

    def _configure_refresh_timer(self) -> None:
        # Leaderboard requests complete on worker threads; poll to pick them up.
        self.refresh_timer = QTimer(self)
        self.refresh_timer.setInterval(SNAPSHOT_REFRESH_INTERVAL_MS)
        self.refresh_timer.timeout.connect(self.refresh)
        self.refresh_timer.start()

    def refresh(self) -> None:
        snapshot = self.controller.get_snapshot()
        if snapshot == self._last_snapshot:
            return
        self._last_snapshot = snapshot
        self._render(snapshot)

    def _render(self, snapshot: QuizSnapshot) -> None:
        view = build_display_model(snapshot)
        index_map = {
            Stage.REGISTRATION: 0,
            Stage.IN_PROGRESS: 1,
            Stage.FINISHED: 2,
        }
        self.stage_stack.setCurrentIndex(index_map[view.stage])

        if not isinstance(view, QuestionView):
            self.question_panel.reset()

        if isinstance(view, RegistrationView):
            self.registration_panel.render(view)
            self.busy_label.setVisible(view.busy)
        elif isinstance(view, QuestionView):
            self.question_panel.render(view)
            self.busy_label.setVisible(view.busy)
        elif isinstance(view, ResultsView):
            self.results_panel.render(view)
            self.busy_label.setVisible(False)

        self.error_label.setText(view.error or "")
        self.error_label.setVisible(view.error is not None)

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)
