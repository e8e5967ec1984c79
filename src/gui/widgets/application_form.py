"""
Job application form widget.

This module builds the form controls and translates their Qt signals into
form change events. It holds no form state of its own: the owner renders
the current FormState into it after every event.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QTextCursor
from PySide6.QtWidgets import (
    QButtonGroup,
    QCheckBox,
    QComboBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from core.config import COVER_LETTER_MAX_LENGTH, EXPERIENCE_OPTIONS, MIN_SKILLS, POSITION_OPTIONS, SKILL_OPTIONS
from core.form_state import ControlKind, FormState
from gui.utils.styling import StyleSheets, get_common_form_layout_config, required_label_html

PLACEHOLDER_OPTION = "--Select--"
SUCCESS_MESSAGE = "Form submitted successfully!"


class ApplicationFormWidget(QWidget):
    """
    Job application form.

    Emits fieldChanged for every user edit, and submitRequested/resetRequested
    for the two buttons.
    """

    fieldChanged = Signal(str, object, object, bool)  # field, value, ControlKind, checked
    submitRequested = Signal()
    resetRequested = Signal()

    def __init__(
        self,
        parent: QWidget | None = None,
        cover_letter_limit: int = COVER_LETTER_MAX_LENGTH,
        show_character_counter: bool = True,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("applicationForm")
        self._cover_letter_limit = cover_letter_limit

        self.error_labels: dict[str, QLabel] = {}
        self.experience_buttons: dict[str, QRadioButton] = {}
        self.skill_checkboxes: dict[str, QCheckBox] = {}

        self._setup_ui()
        self._connect_signals()

        self.cover_letter_counter.setHidden(not show_character_counter)
        self._update_counter()

    def _setup_ui(self) -> None:
        """Create and lay out all controls."""
        config = get_common_form_layout_config()
        layout = QVBoxLayout(self)
        layout.setContentsMargins(*config["margins"])
        layout.setSpacing(config["spacing"])
        self.setMinimumWidth(config["minimum_width"])
        self.setStyleSheet(StyleSheets.get_form_style())

        title = QLabel("Job Application Form")
        title.setObjectName("formTitle")
        title.setStyleSheet("font-weight: bold; font-size: 18px;")
        layout.addWidget(title)

        self.full_name_input = self._add_line_edit(layout, "fullNameInput", required_label_html("Full Name"))
        self._add_error_label(layout, "full_name")

        self.email_input = self._add_line_edit(layout, "emailInput", required_label_html("Email"))
        self._add_error_label(layout, "email")

        self.phone_input = self._add_line_edit(layout, "phoneInput", required_label_html("Phone Number"))
        self._add_error_label(layout, "phone")

        layout.addWidget(self._make_label(required_label_html("Position Applied For")))
        self.position_combo = QComboBox()
        self.position_combo.setObjectName("positionCombo")
        self.position_combo.addItem(PLACEHOLDER_OPTION, "")
        for position in POSITION_OPTIONS:
            self.position_combo.addItem(position, position)
        layout.addWidget(self.position_combo)
        self._add_error_label(layout, "position")

        self.portfolio_input = self._add_line_edit(layout, "portfolioInput", "Portfolio URL")
        self.portfolio_input.setPlaceholderText("https://")
        self._add_error_label(layout, "portfolio")

        layout.addWidget(self._make_label(required_label_html("Experience")))
        self.experience_options = QWidget()
        self.experience_options.setObjectName("experienceOptions")
        experience_layout = QVBoxLayout(self.experience_options)
        experience_layout.setContentsMargins(0, 0, 0, 0)
        self.experience_group = QButtonGroup(self)
        for option in EXPERIENCE_OPTIONS:
            button = QRadioButton(option)
            self.experience_group.addButton(button)
            self.experience_buttons[option] = button
            experience_layout.addWidget(button)
        layout.addWidget(self.experience_options)
        self._add_error_label(layout, "experience")

        layout.addWidget(self._make_label(required_label_html("Skills", f"*required (min {MIN_SKILLS})")))
        self.skill_options = QWidget()
        self.skill_options.setObjectName("skillOptions")
        skills_layout = QVBoxLayout(self.skill_options)
        skills_layout.setContentsMargins(0, 0, 0, 0)
        for option in SKILL_OPTIONS:
            checkbox = QCheckBox(option)
            self.skill_checkboxes[option] = checkbox
            skills_layout.addWidget(checkbox)
        layout.addWidget(self.skill_options)
        self._add_error_label(layout, "skills")

        layout.addWidget(self._make_label(f"Cover Letter (max {self._cover_letter_limit} chars)"))
        self.cover_letter_input = QPlainTextEdit()
        self.cover_letter_input.setObjectName("coverLetterInput")
        self.cover_letter_input.setFixedHeight(110)
        layout.addWidget(self.cover_letter_input)
        self.cover_letter_counter = QLabel()
        self.cover_letter_counter.setObjectName("coverLetterCounter")
        layout.addWidget(self.cover_letter_counter)
        self._add_error_label(layout, "cover_letter")

        self.terms_checkbox = QCheckBox("I accept the terms && conditions *required")
        self.terms_checkbox.setObjectName("termsCheckbox")
        layout.addWidget(self.terms_checkbox)
        self._add_error_label(layout, "terms")

        button_row = QHBoxLayout()
        self.submit_button = QPushButton("Submit")
        self.submit_button.setObjectName("btnSubmit")
        self.submit_button.setDefault(True)
        self.submit_button.setStyleSheet(StyleSheets.get_button_style("primary"))
        button_row.addWidget(self.submit_button)

        self.reset_button = QPushButton("Reset")
        self.reset_button.setObjectName("btnReset")
        self.reset_button.setStyleSheet(StyleSheets.get_button_style("secondary"))
        button_row.addWidget(self.reset_button)
        button_row.addStretch()
        layout.addLayout(button_row)

        self.success_label = QLabel(SUCCESS_MESSAGE)
        self.success_label.setObjectName("successMessage")
        self.success_label.setStyleSheet(StyleSheets.get_success_label_style())
        self.success_label.setHidden(True)
        layout.addWidget(self.success_label)

        layout.addStretch()

    def _make_label(self, text: str) -> QLabel:
        label = QLabel(text)
        label.setTextFormat(Qt.TextFormat.RichText)
        return label

    def _add_line_edit(self, layout: QVBoxLayout, object_name: str, label_text: str) -> QLineEdit:
        layout.addWidget(self._make_label(label_text))
        line_edit = QLineEdit()
        line_edit.setObjectName(object_name)
        layout.addWidget(line_edit)
        return line_edit

    def _add_error_label(self, layout: QVBoxLayout, field: str) -> None:
        label = QLabel()
        label.setObjectName("errorMessage")
        label.setStyleSheet(StyleSheets.get_error_label_style())
        label.setWordWrap(True)
        label.setHidden(True)
        layout.addWidget(label)
        self.error_labels[field] = label

    def _connect_signals(self) -> None:
        """Translate control signals into fieldChanged events."""
        text_inputs = {
            "full_name": self.full_name_input,
            "email": self.email_input,
            "phone": self.phone_input,
            "portfolio": self.portfolio_input,
        }
        for field, line_edit in text_inputs.items():
            line_edit.textChanged.connect(
                lambda text, field=field: self.fieldChanged.emit(field, text, ControlKind.TEXT, False)
            )

        self.position_combo.currentIndexChanged.connect(self._on_position_changed)

        for option, button in self.experience_buttons.items():
            button.toggled.connect(lambda checked, option=option: self._on_experience_toggled(option, checked))

        for option, checkbox in self.skill_checkboxes.items():
            checkbox.toggled.connect(
                lambda checked, option=option: self.fieldChanged.emit(
                    "skills", option, ControlKind.CHECKBOX_GROUP, checked
                )
            )

        self.cover_letter_input.textChanged.connect(self._on_cover_letter_changed)
        self.terms_checkbox.toggled.connect(
            lambda checked: self.fieldChanged.emit("terms", None, ControlKind.CHECKBOX, checked)
        )

        self.submit_button.clicked.connect(self.submitRequested.emit)
        self.reset_button.clicked.connect(self.resetRequested.emit)

    def _on_position_changed(self, index: int) -> None:
        value = self.position_combo.itemData(index) or ""
        self.fieldChanged.emit("position", value, ControlKind.SINGLE_SELECT, False)

    def _on_experience_toggled(self, option: str, checked: bool) -> None:
        # Only the newly selected button reports; the one it replaces is ignored
        if checked:
            self.fieldChanged.emit("experience", option, ControlKind.SINGLE_SELECT, True)

    def _on_cover_letter_changed(self) -> None:
        """Cap the cover letter at the input limit and report the new text."""
        text = self.cover_letter_input.toPlainText()
        if len(text) > self._cover_letter_limit:
            text = text[: self._cover_letter_limit]
            self._set_plain_text(text)

        self._update_counter()
        self.fieldChanged.emit("cover_letter", text, ControlKind.TEXT, False)

    def _set_plain_text(self, text: str) -> None:
        self.cover_letter_input.blockSignals(True)
        try:
            self.cover_letter_input.setPlainText(text)
            self.cover_letter_input.moveCursor(QTextCursor.MoveOperation.End)
        finally:
            self.cover_letter_input.blockSignals(False)

    def _update_counter(self) -> None:
        length = len(self.cover_letter_input.toPlainText())
        self.cover_letter_counter.setText(f"{length}/{self._cover_letter_limit} characters")

    def field_widgets(self) -> dict[str, QWidget]:
        """
        Get the widget that represents each field for error styling.

        Returns:
            Mapping of field name to widget, covering every form field
        """
        return {
            "full_name": self.full_name_input,
            "email": self.email_input,
            "phone": self.phone_input,
            "position": self.position_combo,
            "portfolio": self.portfolio_input,
            "experience": self.experience_options,
            "skills": self.skill_options,
            "cover_letter": self.cover_letter_input,
            "terms": self.terms_checkbox,
        }

    def render(self, state: FormState, submitted: bool = False) -> None:
        """
        Show the given state in the controls without emitting change events.

        Args:
            state: Form state to display
            submitted: Whether to show the success acknowledgment
        """
        self._render_text(self.full_name_input, state.full_name)
        self._render_text(self.email_input, state.email)
        self._render_text(self.phone_input, state.phone)
        self._render_text(self.portfolio_input, state.portfolio)

        index = self.position_combo.findData(state.position) if state.position else 0
        self._without_signals([self.position_combo], lambda: self.position_combo.setCurrentIndex(max(index, 0)))

        self._render_experience(state.experience)

        for option, checkbox in self.skill_checkboxes.items():
            self._without_signals([checkbox], lambda c=checkbox, o=option: c.setChecked(o in state.skills))

        if self.cover_letter_input.toPlainText() != state.cover_letter:
            self._set_plain_text(state.cover_letter)
        self._update_counter()

        self._without_signals([self.terms_checkbox], lambda: self.terms_checkbox.setChecked(state.terms))

        self.success_label.setHidden(not submitted)

    def _render_text(self, line_edit: QLineEdit, value: str) -> None:
        # Only touch the widget when needed so the cursor position survives typing
        if line_edit.text() != value:
            self._without_signals([line_edit], lambda: line_edit.setText(value))

    def _render_experience(self, value: str) -> None:
        buttons = list(self.experience_buttons.values())

        def apply() -> None:
            # An exclusive group refuses to uncheck its last checked button
            self.experience_group.setExclusive(False)
            for option, button in self.experience_buttons.items():
                button.setChecked(option == value)
            self.experience_group.setExclusive(True)

        self._without_signals(buttons, apply)

    @staticmethod
    def _without_signals(widgets: Iterable[QWidget], action: Callable[[], None]) -> None:
        widgets = list(widgets)
        for widget in widgets:
            widget.blockSignals(True)
        try:
            action()
        finally:
            for widget in widgets:
                widget.blockSignals(False)

    def set_submit_enabled(self, enabled: bool) -> None:
        """Enable or disable the submit button."""
        self.submit_button.setEnabled(enabled)
