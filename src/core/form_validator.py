"""
Validation rules for the Job Application Form.

Every rule is evaluated on every pass and all violations are collected
before returning. Validation never raises; bad input only produces
error entries.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from .config import (
    COVER_LETTER_MAX_LENGTH,
    EXPERIENCE_OPTIONS,
    FULL_NAME_MIN_LENGTH,
    MIN_SKILLS,
    PHONE_DIGITS,
    POSITION_OPTIONS,
)
from .errors import ErrorCode, ValidationError
from .form_state import FormState

ErrorMap = dict[str, str]

_TRIM_PATTERN = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+\Z")

# User-facing messages, one per violation
MSG_FULL_NAME_REQUIRED = "Full Name is required."
MSG_FULL_NAME_TOO_SHORT = f"Minimum {FULL_NAME_MIN_LENGTH} characters."
MSG_EMAIL_REQUIRED = "Email is required."
MSG_EMAIL_INVALID = "Invalid email."
MSG_PHONE_REQUIRED = "Phone Number is required."
MSG_PHONE_INVALID = f"Must be {PHONE_DIGITS} digits."
MSG_POSITION_REQUIRED = "Position is required."
MSG_PORTFOLIO_INVALID = "Invalid URL."
MSG_EXPERIENCE_REQUIRED = "Experience is required."
MSG_SKILLS_MINIMUM = f"Select at least {MIN_SKILLS} skills."
MSG_COVER_LETTER_TOO_LONG = f"Max {COVER_LETTER_MAX_LENGTH} characters."
MSG_TERMS_REQUIRED = "You must accept the terms."


class FormValidator:
    """
    Validator for FormState instances.

    Produces an ErrorMap (field name to message) where an empty map means
    the form may be submitted.
    """

    EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")
    PHONE_PATTERN = re.compile(rf"[0-9]{{{PHONE_DIGITS}}}")
    # Only the prefix is checked; no line terminators in the host part
    PORTFOLIO_PATTERN = re.compile(r"https?://[^\n\r\u2028\u2029]+\.[^\n\r\u2028\u2029]+")

    def __init__(
        self,
        position_options: Iterable[str] = POSITION_OPTIONS,
        experience_options: Iterable[str] = EXPERIENCE_OPTIONS,
    ) -> None:
        self.position_options = frozenset(position_options)
        self.experience_options = frozenset(experience_options)

    def validate(self, state: FormState) -> ErrorMap:
        """
        Run one full validation pass.

        Args:
            state: Form state to validate

        Returns:
            Mapping of field name to error message, empty when valid
        """
        return {error.field: error.user_message for error in self.validate_detailed(state) if error.field}

    def validate_detailed(self, state: FormState) -> list[ValidationError]:
        """
        Run one full validation pass and return structured errors.

        At most one error is reported per field.
        """
        errors: list[ValidationError] = []

        errors.extend(self._validate_full_name(state))
        errors.extend(self._validate_contact(state))
        errors.extend(self._validate_selections(state))
        errors.extend(self._validate_portfolio(state))
        errors.extend(self._validate_skills(state))
        errors.extend(self._validate_cover_letter(state))
        errors.extend(self._validate_terms(state))

        return errors

    def is_valid(self, state: FormState) -> bool:
        """Check whether the state passes every rule."""
        return not self.validate(state)

    def _validate_full_name(self, state: FormState) -> list[ValidationError]:
        name = _trim(_as_text(state.full_name))
        if not name:
            return [_error("full_name", ErrorCode.REQUIRED_FIELD_MISSING, MSG_FULL_NAME_REQUIRED, state.full_name)]
        if len(name) < FULL_NAME_MIN_LENGTH:
            return [_error("full_name", ErrorCode.VALUE_OUT_OF_RANGE, MSG_FULL_NAME_TOO_SHORT, state.full_name)]
        return []

    def _validate_contact(self, state: FormState) -> list[ValidationError]:
        """Validate email and phone; format checks run on the untrimmed value."""
        errors = []

        email = _as_text(state.email)
        if not _trim(email):
            errors.append(_error("email", ErrorCode.REQUIRED_FIELD_MISSING, MSG_EMAIL_REQUIRED, state.email))
        elif not self.EMAIL_PATTERN.fullmatch(email):
            errors.append(_error("email", ErrorCode.INVALID_FORMAT, MSG_EMAIL_INVALID, state.email))

        phone = _as_text(state.phone)
        if not _trim(phone):
            errors.append(_error("phone", ErrorCode.REQUIRED_FIELD_MISSING, MSG_PHONE_REQUIRED, state.phone))
        elif not self.PHONE_PATTERN.fullmatch(phone):
            errors.append(_error("phone", ErrorCode.INVALID_FORMAT, MSG_PHONE_INVALID, state.phone))

        return errors

    def _validate_selections(self, state: FormState) -> list[ValidationError]:
        """A value outside the option set counts as no selection."""
        errors = []

        if _as_text(state.position) not in self.position_options:
            errors.append(
                _error("position", ErrorCode.REQUIRED_FIELD_MISSING, MSG_POSITION_REQUIRED, state.position)
            )

        if _as_text(state.experience) not in self.experience_options:
            errors.append(
                _error("experience", ErrorCode.REQUIRED_FIELD_MISSING, MSG_EXPERIENCE_REQUIRED, state.experience)
            )

        return errors

    def _validate_portfolio(self, state: FormState) -> list[ValidationError]:
        portfolio = _as_text(state.portfolio)
        if portfolio and not self.PORTFOLIO_PATTERN.match(portfolio):
            return [_error("portfolio", ErrorCode.INVALID_FORMAT, MSG_PORTFOLIO_INVALID, state.portfolio)]
        return []

    def _validate_skills(self, state: FormState) -> list[ValidationError]:
        skills = state.skills if isinstance(state.skills, set | frozenset | list | tuple) else ()
        # Only string members count as selected options
        selected = {skill for skill in skills if isinstance(skill, str)}
        if len(selected) < MIN_SKILLS:
            return [_error("skills", ErrorCode.VALUE_OUT_OF_RANGE, MSG_SKILLS_MINIMUM, state.skills)]
        return []

    def _validate_cover_letter(self, state: FormState) -> list[ValidationError]:
        # The text control caps input too, but pasted text can get past it
        if len(_as_text(state.cover_letter)) > COVER_LETTER_MAX_LENGTH:
            return [
                _error("cover_letter", ErrorCode.VALUE_OUT_OF_RANGE, MSG_COVER_LETTER_TOO_LONG, state.cover_letter)
            ]
        return []

    def _validate_terms(self, state: FormState) -> list[ValidationError]:
        if state.terms is not True:
            return [_error("terms", ErrorCode.REQUIRED_FIELD_MISSING, MSG_TERMS_REQUIRED, state.terms)]
        return []


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _trim(value: str) -> str:
    """Strip surrounding whitespace, including the byte order mark."""
    return _TRIM_PATTERN.sub("", value)


def _error(field: str, code: ErrorCode, message: str, value: Any) -> ValidationError:
    return ValidationError(
        code=code,
        user_message=message,
        field=field,
        technical_message=f"Validation failed for field '{field}': {message}",
        context={"value": value},
    )


def validate(state: FormState) -> ErrorMap:
    """
    Convenience function to validate a form state with the default options.

    Args:
        state: Form state to validate

    Returns:
        ErrorMap for the state
    """
    return FormValidator().validate(state)
