"""
Submission payloads for the Job Application Form.

Builds the JSON payload for a successfully validated form and emits it to
the log. Nothing is persisted.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

import jsonschema

from .config import SKILL_OPTIONS, SUBMISSION_JSON_SCHEMA
from .errors import ErrorCode, SystemError
from .form_state import FIELD_NAMES, FormState

logger = logging.getLogger(__name__)

SubmissionSink = Callable[[dict[str, Any]], None]


def build_payload(state: FormState) -> dict[str, Any]:
    """
    Build a JSON-serializable payload from a form state.

    Skills are listed in option order; values outside the option list
    follow in sorted order.

    Args:
        state: Form state to serialize

    Returns:
        Dictionary keyed by field name
    """
    payload: dict[str, Any] = {name: getattr(state, name) for name in FIELD_NAMES}

    known = [skill for skill in SKILL_OPTIONS if skill in state.skills]
    extra = sorted(skill for skill in state.skills if skill not in SKILL_OPTIONS)
    payload["skills"] = known + extra

    return payload


def check_payload(payload: dict[str, Any]) -> None:
    """
    Check a payload against the submission JSON schema.

    Args:
        payload: Payload produced by build_payload

    Raises:
        SystemError: If the payload does not match the schema
    """
    try:
        jsonschema.validate(payload, SUBMISSION_JSON_SCHEMA)
    except jsonschema.ValidationError as e:
        path = ".".join(str(p) for p in e.absolute_path) or "payload"
        raise SystemError(
            code=ErrorCode.SUBMISSION_FAILED,
            user_message="The application could not be submitted.",
            technical_message=f"Submission payload failed schema check at {path}: {e.message}",
            context={"path": path},
        ) from e


def log_submission(payload: dict[str, Any]) -> None:
    """Default sink: check the payload and write it to the log as JSON."""
    check_payload(payload)
    logger.info("Form Submitted: %s", json.dumps(payload, indent=2))
