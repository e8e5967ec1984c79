"""
Main window for the Job Application Form.

This module contains the MainWindow class which hosts the application form
and wires it to the form session.
"""

import logging

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QScrollArea

from core.config import COVER_LETTER_MAX_LENGTH
from core.config_manager import ConfigManager
from core.error_handler import get_error_handler
from core.errors import BaseAppError, ErrorType
from core.form_session import FormSession
from core.submission import SubmissionSink
from gui.handlers.form_handler import FormHandler
from gui.validation.input_validator import InputValidator
from gui.widgets.application_form import ApplicationFormWidget

STATUS_TIMEOUT_MS = 5000


class MainWindow(QMainWindow):
    """
    Main application window.

    Owns the FormSession; every user event is handled to completion by the
    FormHandler before the next one is processed.
    """

    def __init__(self, config_manager: ConfigManager | None = None, sink: SubmissionSink | None = None) -> None:
        """
        Initialize the main window.

        Args:
            config_manager: Settings source; a QSettings-backed one is created if omitted
            sink: Receiver for submitted payloads; defaults to the log
        """
        super().__init__()
        self._logger = logging.getLogger(__name__)

        self.config_manager = config_manager or ConfigManager()
        self.session = FormSession(
            sink=sink,
            revalidate_on_change=bool(self.config_manager.get("revalidate_on_change")),
        )

        self._setup_window_properties()

        self.form = ApplicationFormWidget(
            cover_letter_limit=COVER_LETTER_MAX_LENGTH,
            show_character_counter=bool(self.config_manager.get("show_character_counter")),
        )
        scroll_area = QScrollArea()
        scroll_area.setWidgetResizable(True)
        scroll_area.setWidget(self.form)
        self.setCentralWidget(scroll_area)

        self.input_validator = InputValidator(self)
        for field, widget in self.form.field_widgets().items():
            self.input_validator.register_field(field, widget, self.form.error_labels.get(field))

        self.form_handler = FormHandler(self)

        self._connect_signals()
        self.form_handler.render()

    def _setup_window_properties(self) -> None:
        """Set up basic window properties."""
        self.setWindowTitle("Job Application Form")
        self.setMinimumSize(480, 600)
        self.resize(560, 820)

    def _connect_signals(self) -> None:
        """Connect form signals to their handlers."""
        self.form.fieldChanged.connect(self.form_handler.on_field_changed)
        self.form.submitRequested.connect(self.form_handler.on_submit_requested)
        self.form.resetRequested.connect(self.form_handler.on_reset_requested)

        get_error_handler().errorOccurred.connect(self._on_error_occurred)

    def _on_error_occurred(self, app_error: BaseAppError) -> None:
        """Surface non-validation errors in the status bar."""
        if app_error.type != ErrorType.VALIDATION:
            self.show_status_message(get_error_handler().to_user_message(app_error))

    def show_status_message(self, message: str) -> None:
        """Show a transient message in the status bar."""
        self.statusBar().showMessage(message, STATUS_TIMEOUT_MS)

    def closeEvent(self, event: QCloseEvent) -> None:
        """Handle window close event."""
        try:
            get_error_handler().errorOccurred.disconnect(self._on_error_occurred)
        except (RuntimeError, TypeError):
            self._logger.debug("Error signal was already disconnected")

        self.input_validator.cleanup()
        event.accept()
