"""
Validation feedback for the Job Application Form GUI.

This package shows the results of the form validator on the form widgets.
"""

from .input_validator import FieldFeedback, InputValidator

__all__ = [
    "FieldFeedback",
    "InputValidator",
]
