"""
Inline validation feedback for the Job Application Form.

This module applies an ErrorMap produced by the form validator to the
registered widgets: error styling, tooltips and inline messages.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal
from PySide6.QtWidgets import QLabel, QWidget

from core.form_validator import ErrorMap
from gui.utils.styling import refresh_style


class FieldFeedback:
    """Widgets and last shown message for a single field."""

    def __init__(self, widget: QWidget, error_label: QLabel | None = None):
        self.widget = widget
        self.error_label = error_label
        self.last_error_message = ""
        self.original_tooltip = widget.toolTip()

    @property
    def is_valid(self) -> bool:
        return not self.last_error_message


class InputValidator(QObject):
    """
    Displays validation results on form widgets.

    The ErrorMap is always applied as a whole; fields missing from the map
    are shown as valid.
    """

    # Signals
    fieldValidityChanged = Signal(str, bool, str)  # key, valid, message
    overallValidityChanged = Signal(bool)  # overall_valid

    def __init__(self, parent: QObject | None = None):
        super().__init__(parent)
        self._logger = logging.getLogger(__name__)
        self._fields: dict[str, FieldFeedback] = {}

    def register_field(self, key: str, widget: QWidget, error_label: QLabel | None = None) -> None:
        """
        Register a field for validation feedback.

        Args:
            key: Field name as used in the ErrorMap
            widget: The input widget to style
            error_label: Optional label that shows the message inline
        """
        self._fields[key] = FieldFeedback(widget, error_label)
        self._clear_field_error(self._fields[key])

    def apply_errors(self, errors: ErrorMap) -> bool:
        """
        Show the given ErrorMap on the registered widgets.

        Args:
            errors: Field name to message for the current validation pass

        Returns:
            True if no errors are shown
        """
        unknown = set(errors) - set(self._fields)
        if unknown:
            self._logger.warning(f"Errors for unregistered fields: {', '.join(sorted(unknown))}")

        for key, field in self._fields.items():
            message = errors.get(key, "")
            if message == field.last_error_message:
                continue

            field.last_error_message = message
            if message:
                self._set_field_error(field, message)
                self._logger.info(f"Field '{key}' invalid: {message}")
            else:
                self._clear_field_error(field)

            self.fieldValidityChanged.emit(key, not message, message)

        overall_valid = not errors
        self.overallValidityChanged.emit(overall_valid)
        return overall_valid

    def _set_field_error(self, field: FieldFeedback, message: str) -> None:
        """Mark a field as having an error and show feedback."""
        widget = field.widget
        widget.blockSignals(True)
        try:
            widget.setProperty("hasError", True)
            widget.setToolTip(f"Error: {message}")
            refresh_style(widget)
        finally:
            widget.blockSignals(False)

        if field.error_label is not None:
            field.error_label.setText(message)
            field.error_label.setHidden(False)

    def _clear_field_error(self, field: FieldFeedback) -> None:
        """Clear error state from a field."""
        widget = field.widget
        widget.blockSignals(True)
        try:
            widget.setProperty("hasError", False)
            widget.setToolTip(field.original_tooltip)
            refresh_style(widget)
        finally:
            widget.blockSignals(False)

        if field.error_label is not None:
            field.error_label.clear()
            field.error_label.setHidden(True)

    def clear(self) -> None:
        """Remove all error feedback."""
        self.apply_errors({})

    def is_field_valid(self, key: str) -> bool:
        """
        Check if a specific field is currently shown as valid.

        Args:
            key: Field identifier

        Returns:
            True if valid or not registered, False otherwise
        """
        if key in self._fields:
            return self._fields[key].is_valid
        return True

    def get_field_error(self, key: str) -> str:
        """
        Get the error message shown for a specific field.

        Args:
            key: Field identifier

        Returns:
            Error message or empty string if valid
        """
        if key in self._fields:
            return self._fields[key].last_error_message
        return ""

    def cleanup(self) -> None:
        """Forget all registered fields."""
        self._fields.clear()
