"""
Reusable GUI widgets for the Job Application Form.

This module contains the application form widget.
"""

from .application_form import ApplicationFormWidget

__all__ = ["ApplicationFormWidget"]
