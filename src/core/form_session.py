"""
Submit/reset state machine for the Job Application Form.

This module ties the form state, the validator and the submission sink
together. Events are handled one at a time, in the order they arrive.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Any

from .form_state import ControlKind, FormState, apply_change
from .form_validator import ErrorMap, FormValidator
from .submission import SubmissionSink, build_payload, log_submission


class FormPhase(Enum):
    """
    Phases of the form.

    There is no terminal phase; reset always returns to EDITING.
    """

    EDITING = auto()  # Initial phase, no errors shown
    EDITING_WITH_ERRORS = auto()  # Last submit attempt failed validation
    SUBMITTED_CLEAN = auto()  # Last submit succeeded, form cleared


class FormSession:
    """
    Owns the form state and drives the submit/reset transitions.

    The GUI calls apply_change, submit and reset in response to user
    events and renders state, errors and phase afterwards.
    """

    def __init__(
        self,
        validator: FormValidator | None = None,
        sink: SubmissionSink | None = None,
        revalidate_on_change: bool = True,
    ) -> None:
        self._logger = logging.getLogger(__name__)
        self.validator = validator or FormValidator()
        self.sink: SubmissionSink = sink or log_submission
        self.revalidate_on_change = revalidate_on_change

        self.state = FormState()
        self.errors: ErrorMap = {}
        self.submitted = False

    @property
    def phase(self) -> FormPhase:
        """Current phase derived from errors and the submitted flag."""
        if self.errors:
            return FormPhase.EDITING_WITH_ERRORS
        if self.submitted:
            return FormPhase.SUBMITTED_CLEAN
        return FormPhase.EDITING

    @property
    def can_submit(self) -> bool:
        """Submission is allowed only while no errors are shown."""
        return not self.errors

    def apply_change(self, field_name: str, raw_value: Any, kind: ControlKind, checked: bool = False) -> FormState:
        """
        Apply a single control event to the state.

        When errors are on display and revalidate_on_change is set, the
        ErrorMap is refreshed so the user can see fields become valid and
        submit is re-enabled once the form is correct.
        """
        apply_change(self.state, field_name, raw_value, kind, checked)

        if self.errors and self.revalidate_on_change:
            self.errors = self.validator.validate(self.state)

        return self.state

    def submit(self) -> bool:
        """
        Attempt to submit the form.

        Returns:
            True if the form was valid and has been emitted and cleared
        """
        errors = self.validator.validate(self.state)
        if errors:
            self.errors = errors
            self.submitted = False
            self._logger.info(f"Submission blocked, invalid fields: {', '.join(errors)}")
            return False

        # The sink may raise; state is left untouched in that case
        self.sink(build_payload(self.state))

        self.state.clear()
        self.errors = {}
        self.submitted = True
        self._logger.info("Application submitted")
        return True

    def reset(self) -> None:
        """Return to the initial empty state."""
        self.state.clear()
        self.errors = {}
        self.submitted = False
        self._logger.debug("Form reset")
