"""
GUI-specific utilities for the Job Application Form.

This module contains styling helpers shared by the form widgets.
"""

from .styling import (
    AccessiblePalette,
    StyleSheets,
    get_common_form_layout_config,
    refresh_style,
    required_label_html,
)

__all__ = [
    "AccessiblePalette",
    "StyleSheets",
    "get_common_form_layout_config",
    "refresh_style",
    "required_label_html",
]
