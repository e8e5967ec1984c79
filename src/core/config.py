"""
Configuration for the Job Application Form.

This module provides the fixed option sets and field limits used by the form,
the defaults for user settings, and the JSON schema for submission payloads.
"""

from pathlib import Path
from typing import Any

from PySide6.QtCore import QCoreApplication, QStandardPaths

# Application identifiers for QSettings
APP_ORGANIZATION = "JobApplicationForm"
APP_NAME = "Form"

# Option sets offered by the selection controls
POSITION_OPTIONS: tuple[str, ...] = ("Frontend Developer", "Backend Developer", "Full Stack Developer")
EXPERIENCE_OPTIONS: tuple[str, ...] = ("Fresher", "1-3 years", "3+ years")
SKILL_OPTIONS: tuple[str, ...] = ("HTML", "CSS", "JavaScript", "React", "Node.js", "MongoDB")

# Field limits
FULL_NAME_MIN_LENGTH = 3
PHONE_DIGITS = 10
MIN_SKILLS = 2
COVER_LETTER_MAX_LENGTH = 300

# Default user settings with JSON-serializable types
DEFAULT_CONFIG: dict[str, Any] = {
    "log_level": "INFO",  # Options: "DEBUG", "INFO", "WARNING", "ERROR"
    "revalidate_on_change": True,
    "show_character_counter": True,
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# JSON Schema for the payload emitted on successful submission (draft-07)
SUBMISSION_JSON_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Job Application Submission",
    "type": "object",
    "required": [
        "full_name",
        "email",
        "phone",
        "position",
        "portfolio",
        "experience",
        "skills",
        "cover_letter",
        "terms",
    ],
    "additionalProperties": False,
    "properties": {
        "full_name": {"type": "string", "minLength": FULL_NAME_MIN_LENGTH},
        "email": {"type": "string", "minLength": 1},
        "phone": {"type": "string", "pattern": f"^[0-9]{{{PHONE_DIGITS}}}$"},
        "position": {"type": "string", "enum": list(POSITION_OPTIONS)},
        "portfolio": {"type": "string"},
        "experience": {"type": "string", "enum": list(EXPERIENCE_OPTIONS)},
        "skills": {
            "type": "array",
            "items": {"type": "string"},
            "minItems": MIN_SKILLS,
            "uniqueItems": True,
        },
        "cover_letter": {"type": "string", "maxLength": COVER_LETTER_MAX_LENGTH},
        "terms": {"type": "boolean", "const": True},
    },
}


def get_app_config_dir() -> Path:
    """
    Get the application configuration directory using QStandardPaths.

    Returns:
        Path to the writable configuration directory for this application
    """
    config_location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.ConfigLocation)
    return Path(config_location) / APP_ORGANIZATION / APP_NAME


def setup_qsettings() -> None:
    """
    Configure QSettings with application identifiers.

    This should be called early in application startup to ensure
    QSettings uses the correct organization and application names.
    """
    QCoreApplication.setOrganizationName(APP_ORGANIZATION)
    QCoreApplication.setApplicationName(APP_NAME)
