"""Component for entering the player name."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtWidgets import QLabel, QLineEdit, QPushButton, QVBoxLayout, QWidget

from quiz_battle.constants.ui_constants import NAME_PLACEHOLDER, START_BUTTON
from quiz_battle.core.display_model import RegistrationView
from quiz_battle.core.errors import ValidationError
from quiz_battle.core.quiz_controller import QuizController
from quiz_battle.styling.styles import Styles


class RegistrationPanel(QWidget):
    """UI component for the registration stage."""

    def __init__(
        self,
        controller: QuizController,
        on_state_changed: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.controller = controller
        self.on_state_changed = on_state_changed

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.heading_label = QLabel(self)
        self.heading_label.setWordWrap(True)
        self.heading_label.setStyleSheet(Styles.get_heading_style())
        layout.addWidget(self.heading_label)

        self.name_input = QLineEdit(self)
        self.name_input.setPlaceholderText(NAME_PLACEHOLDER)
        self.name_input.textEdited.connect(self._handle_name_edited)
        self.name_input.returnPressed.connect(self._handle_start_click)
        layout.addWidget(self.name_input)

        self.start_button = QPushButton(START_BUTTON, self)
        self.start_button.clicked.connect(self._handle_start_click)
        layout.addWidget(self.start_button)

        layout.addStretch()

    def _handle_name_edited(self, text: str) -> None:
        self.controller.set_player_name(text)

    def _handle_start_click(self) -> None:
        try:
            self.controller.start_quiz()
        except ValidationError:
            # The message is part of the next snapshot; keep the cursor in the field.
            self.name_input.setFocus()
        self.on_state_changed()

    def render(self, view: RegistrationView) -> None:
        self.heading_label.setText(view.heading)
        if self.name_input.text() != view.player_name:
            self.name_input.setText(view.player_name)
