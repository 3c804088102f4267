"""Component showing the current question and its options."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QAbstractButton,
    QButtonGroup,
    QLabel,
    QPushButton,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from quiz_battle.core.display_model import QuestionView
from quiz_battle.core.quiz_controller import QuizController
from quiz_battle.styling.color_palette import Theme
from quiz_battle.styling.styles import Styles
from quiz_battle.ui.question_renderer import render_prompt_html


class QuestionPanel(QWidget):
    """UI component for answering one question at a time."""

    def __init__(
        self,
        controller: QuizController,
        on_state_changed: Callable[[], None],
        parent: QWidget | None = None,
        theme: Theme = Theme.LIGHT,
    ) -> None:
        super().__init__(parent)
        self.controller = controller
        self.on_state_changed = on_state_changed
        self._theme = theme

        self._question_id: int | None = None
        self._option_buttons: list[QRadioButton] = []
        self._font_size: int = 14

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.heading_label = QLabel(self)
        self.heading_label.setStyleSheet(Styles.get_heading_style())
        layout.addWidget(self.heading_label)

        self.prompt_label = QLabel(self)
        self.prompt_label.setTextFormat(Qt.RichText)
        self.prompt_label.setWordWrap(True)
        layout.addWidget(self.prompt_label)

        self.options_layout = QVBoxLayout()
        layout.addLayout(self.options_layout)

        self.option_group = QButtonGroup(self)
        self.option_group.setExclusive(True)
        self.option_group.buttonClicked.connect(self._handle_option_clicked)

        self.action_button = QPushButton(self)
        self.action_button.clicked.connect(self._handle_action_click)
        layout.addWidget(self.action_button)

        layout.addStretch()

    def _handle_option_clicked(self, button: QAbstractButton) -> None:
        self.controller.select_answer(button.text())
        self.on_state_changed()

    def _handle_action_click(self) -> None:
        self.controller.advance()
        self.on_state_changed()

    def _rebuild_options(self, view: QuestionView) -> None:
        for button in self._option_buttons:
            self.option_group.removeButton(button)
            self.options_layout.removeWidget(button)
            button.deleteLater()
        self._option_buttons = []

        for option in view.options:
            button = QRadioButton(option.text, self)
            self.option_group.addButton(button)
            self.options_layout.addWidget(button)
            self._option_buttons.append(button)

        self.prompt_label.setText(render_prompt_html(view.prompt, self._font_size))
        self._question_id = view.question_id

    def render(self, view: QuestionView) -> None:
        if view.question_id != self._question_id:
            self._rebuild_options(view)

        self.heading_label.setText(view.heading)
        # An exclusive group refuses to uncheck its checked button.
        self.option_group.setExclusive(False)
        for button, option in zip(self._option_buttons, view.options):
            button.setChecked(option.selected)
            button.setEnabled(view.options_enabled)
            button.setStyleSheet(Styles.get_option_style(option.status, self._theme))
        self.option_group.setExclusive(True)

        self.action_button.setText(view.action_label)
        self.action_button.setEnabled(view.can_advance)

    def apply_font_size(self, font_size: int) -> None:
        self._font_size = font_size
        self.reset()

    def reset(self) -> None:
        """Forget the rendered question so the next render rebuilds the options."""
        self._question_id = None
