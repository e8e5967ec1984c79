"""
Form event handling for the main window.

This module routes form widget events to the FormSession one at a time
and renders the result back into the form.
"""

import logging
from typing import TYPE_CHECKING, Any

from core.error_handler import get_error_handler
from core.errors import BaseAppError
from core.form_session import FormPhase
from core.form_state import ControlKind

if TYPE_CHECKING:
    from gui.main_window import MainWindow


class FormHandler:
    """Dispatches change, submit and reset events for the main window."""

    def __init__(self, main_window: "MainWindow") -> None:
        """Initialize the form handler."""
        self.main_window = main_window
        self._logger = logging.getLogger(__name__)
        self._error_handler = get_error_handler()

    def on_field_changed(self, field_name: str, value: Any, kind: ControlKind, checked: bool) -> None:
        """Apply one control event and re-render."""
        try:
            self.main_window.session.apply_change(field_name, value, kind, checked)
        except BaseAppError as e:
            self._error_handler.handle(e, {"field": field_name, "kind": kind.value})
        self.render()

    def on_submit_requested(self) -> None:
        """Validate and submit the form."""
        session = self.main_window.session
        if not session.can_submit:
            self._logger.debug("Submit ignored while errors are shown")
            return

        try:
            accepted = session.submit()
        except Exception as e:
            # Sink failures keep the entered data so the user can try again
            app_error = self._error_handler.handle(e, {"source": "submission"})
            self.main_window.show_status_message(self._error_handler.to_user_message(app_error))
            self.render()
            return

        self.render()
        if accepted:
            self.main_window.show_status_message("Application submitted")
        else:
            self.main_window.show_status_message(f"Please correct {len(session.errors)} field(s)")

    def on_reset_requested(self) -> None:
        """Clear the form."""
        self.main_window.session.reset()
        self.render()
        self.main_window.show_status_message("Form cleared")

    def render(self) -> None:
        """Show the current session state, errors and phase."""
        session = self.main_window.session
        form = self.main_window.form

        form.render(session.state, submitted=session.phase == FormPhase.SUBMITTED_CLEAN)
        self.main_window.input_validator.apply_errors(session.errors)
        form.set_submit_enabled(session.can_submit)
