"""
Tests for the MainWindow class.
"""

from unittest.mock import Mock

import pytest

from core.errors import ErrorCode, SystemError, ValidationError
from core.form_session import FormPhase
from core.form_state import ControlKind, FormState
from core.form_validator import MSG_PHONE_INVALID, MSG_SKILLS_MINIMUM, MSG_TERMS_REQUIRED
from gui.main_window import MainWindow


@pytest.fixture
def config_manager():
    """Config manager returning the default for every boolean setting."""
    return Mock(get=Mock(return_value=True))


@pytest.fixture
def window(qtbot, config_manager):
    sink = Mock()
    win = MainWindow(config_manager=config_manager, sink=sink)
    qtbot.addWidget(win)
    win.sink = sink
    return win


def fill_reference_application(form):
    """Fill the form through its controls the way a user would."""
    form.full_name_input.setText("Jane Doe")
    form.email_input.setText("jane@example.com")
    form.phone_input.setText("9876543210")
    form.position_combo.setCurrentIndex(form.position_combo.findData("Frontend Developer"))
    form.experience_buttons["1-3 years"].setChecked(True)
    form.skill_checkboxes["HTML"].click()
    form.skill_checkboxes["CSS"].click()
    form.terms_checkbox.click()


class TestMainWindowInitialization:
    """Test MainWindow initialization and setup."""

    def test_window_properties(self, window):
        """Test that window properties are set correctly."""
        assert window.windowTitle() == "Job Application Form"
        assert window.size().width() == 560
        assert window.size().height() == 820

    def test_initial_state(self, window):
        """Test that the window starts with an empty, submittable form."""
        assert window.session.phase == FormPhase.EDITING
        assert window.form.submit_button.isEnabled()
        assert window.form.success_label.isHidden()

    def test_settings_are_applied(self, qtbot):
        """Test that configuration reaches the session and the form."""
        config_manager = Mock(get=Mock(return_value=False))
        win = MainWindow(config_manager=config_manager, sink=Mock())
        qtbot.addWidget(win)

        assert win.session.revalidate_on_change is False
        assert win.form.cover_letter_counter.isHidden()


class TestSubmitFlow:
    """Test the submit, correct and reset cycle through the widgets."""

    def test_successful_submission(self, window):
        """Test the reference application end to end."""
        fill_reference_application(window.form)

        window.form.submit_button.click()

        window.sink.assert_called_once()
        payload = window.sink.call_args.args[0]
        assert payload["full_name"] == "Jane Doe"
        assert payload["position"] == "Frontend Developer"
        assert payload["skills"] == ["HTML", "CSS"]
        assert payload["terms"] is True

        assert window.session.state == FormState()
        assert window.form.full_name_input.text() == ""
        assert not any(button.isChecked() for button in window.form.experience_buttons.values())
        assert not window.form.success_label.isHidden()
        assert window.statusBar().currentMessage() == "Application submitted"

    def test_failed_submission_shows_errors(self, window):
        """Test that an invalid form shows inline errors and blocks submit."""
        fill_reference_application(window.form)
        window.form.phone_input.setText("12345")
        window.form.skill_checkboxes["CSS"].click()
        window.form.terms_checkbox.click()

        window.form.submit_button.click()

        window.sink.assert_not_called()
        assert window.session.errors == {
            "phone": MSG_PHONE_INVALID,
            "skills": MSG_SKILLS_MINIMUM,
            "terms": MSG_TERMS_REQUIRED,
        }
        assert window.form.error_labels["phone"].text() == MSG_PHONE_INVALID
        assert not window.form.error_labels["phone"].isHidden()
        assert window.form.phone_input.property("hasError") is True
        assert window.form.error_labels["email"].isHidden()
        assert window.form.full_name_input.text() == "Jane Doe"
        assert not window.form.submit_button.isEnabled()
        assert window.statusBar().currentMessage() == "Please correct 3 field(s)"

    def test_corrections_reenable_submit(self, window):
        """Test that fixing every field clears errors and allows submitting."""
        window.form.submit_button.click()
        assert not window.form.submit_button.isEnabled()

        fill_reference_application(window.form)

        assert window.session.errors == {}
        assert window.form.submit_button.isEnabled()
        assert all(label.isHidden() for label in window.form.error_labels.values())

        window.form.submit_button.click()
        window.sink.assert_called_once()

    def test_reset_clears_everything(self, window):
        """Test that reset empties the form and removes feedback."""
        window.form.email_input.setText("jane@")
        window.form.submit_button.click()

        window.form.reset_button.click()

        assert window.session.state == FormState()
        assert window.session.errors == {}
        assert window.form.email_input.text() == ""
        assert window.form.email_input.property("hasError") is False
        assert window.form.submit_button.isEnabled()
        assert window.statusBar().currentMessage() == "Form cleared"

    def test_sink_failure_keeps_data(self, window):
        """Test that a failing sink is reported and the entries survive."""
        window.sink.side_effect = SystemError(ErrorCode.SUBMISSION_FAILED, "The application could not be submitted.")
        fill_reference_application(window.form)

        window.form.submit_button.click()

        assert window.session.state.full_name == "Jane Doe"
        assert window.form.full_name_input.text() == "Jane Doe"
        assert window.form.success_label.isHidden()
        assert window.statusBar().currentMessage() == "The application could not be submitted."


class TestHandlerErrors:
    """Test error routing in the form handler."""

    def test_unknown_field_event_is_handled(self, window):
        """Test that a bad change event is reported without breaking the form."""
        window.form_handler.on_field_changed("nickname", "JD", ControlKind.TEXT, False)

        assert window.session.state == FormState()
        assert window.form.submit_button.isEnabled()

    def test_validation_errors_stay_out_of_status_bar(self, window):
        """Test that only non-validation errors reach the status bar."""
        window._on_error_occurred(ValidationError(ErrorCode.INVALID_INPUT, "Unknown form field", field="nickname"))
        assert window.statusBar().currentMessage() == ""

        window._on_error_occurred(SystemError(ErrorCode.OS_ERROR, "Disk full"))
        assert window.statusBar().currentMessage() == "Disk full"
