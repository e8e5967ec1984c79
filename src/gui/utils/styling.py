"""
Shared styling utilities for the Job Application Form.

This module contains the color palette and stylesheet builders used by the
form widget, its inline error messages and its buttons.
"""

from typing import Any, Protocol


class StyleableWidget(Protocol):
    """Protocol for widgets that can be styled."""

    def setStyleSheet(self, styleSheet: str) -> None: ...
    def style(self) -> Any: ...


class AccessiblePalette:
    """
    Centralized color palette.

    Text/background pairs keep a contrast ratio of at least 4.5:1.
    """

    ERROR_TEXT = "#b02a37"  # Dark red for inline messages
    ERROR_BG = "#f8d7da"

    SUCCESS_TEXT = "#146c43"  # Dark green for the acknowledgment
    SUCCESS_BG = "#d1e7dd"

    BORDER_DEFAULT = "#ced4da"
    BORDER_FOCUS = "#0d6efd"
    BORDER_ERROR = "#dc3545"
    BORDER_SUCCESS = "#198754"

    BACKGROUND_DEFAULT = "#ffffff"
    BACKGROUND_DISABLED = "#e9ecef"

    TEXT_PRIMARY = "#212529"
    TEXT_SECONDARY = "#6c757d"
    TEXT_DISABLED = "#adb5bd"
    REQUIRED_MARKER = "#dc3545"

    BUTTON_PRIMARY_BG = "#0d6efd"
    BUTTON_PRIMARY_TEXT = "#ffffff"
    BUTTON_SECONDARY_BG = "#6c757d"
    BUTTON_SECONDARY_TEXT = "#ffffff"


class StyleSheets:
    """Collection of reusable stylesheet definitions using the accessible palette."""

    @staticmethod
    def get_form_style() -> str:
        """
        Get the stylesheet for the whole form.

        Controls with the dynamic property hasError=true get a red border.
        """
        return f"""
            QLineEdit, QComboBox, QPlainTextEdit {{
                border: 1px solid {AccessiblePalette.BORDER_DEFAULT};
                border-radius: 4px;
                padding: 4px;
                background-color: {AccessiblePalette.BACKGROUND_DEFAULT};
                color: {AccessiblePalette.TEXT_PRIMARY};
            }}

            QLineEdit:focus, QComboBox:focus, QPlainTextEdit:focus {{
                border: 1px solid {AccessiblePalette.BORDER_FOCUS};
            }}

            QLineEdit[hasError="true"], QComboBox[hasError="true"], QPlainTextEdit[hasError="true"] {{
                border: 1px solid {AccessiblePalette.BORDER_ERROR};
            }}

            QWidget[hasError="true"] QRadioButton, QWidget[hasError="true"] QCheckBox, QCheckBox[hasError="true"] {{
                color: {AccessiblePalette.ERROR_TEXT};
            }}
        """

    @staticmethod
    def get_error_label_style() -> str:
        """Get stylesheet for inline field error messages."""
        return f"""
            QLabel {{
                color: {AccessiblePalette.ERROR_TEXT};
                font-size: 12px;
                margin-bottom: 4px;
            }}
        """

    @staticmethod
    def get_success_label_style() -> str:
        """Get stylesheet for the submission acknowledgment."""
        return f"""
            QLabel {{
                color: {AccessiblePalette.SUCCESS_TEXT};
                background-color: {AccessiblePalette.SUCCESS_BG};
                border: 1px solid {AccessiblePalette.BORDER_SUCCESS};
                border-radius: 4px;
                font-weight: bold;
                padding: 8px;
            }}
        """

    @staticmethod
    def get_button_style(button_type: str = "primary") -> str:
        """Get button stylesheet for the given type."""
        if button_type == "primary":
            background = AccessiblePalette.BUTTON_PRIMARY_BG
            text = AccessiblePalette.BUTTON_PRIMARY_TEXT
        else:
            background = AccessiblePalette.BUTTON_SECONDARY_BG
            text = AccessiblePalette.BUTTON_SECONDARY_TEXT

        return f"""
            QPushButton {{
                background-color: {background};
                color: {text};
                border: 2px solid {background};
                border-radius: 4px;
                padding: 8px 16px;
                font-weight: bold;
                min-height: 20px;
            }}

            QPushButton:disabled {{
                background-color: {AccessiblePalette.BACKGROUND_DISABLED};
                color: {AccessiblePalette.TEXT_DISABLED};
                border-color: {AccessiblePalette.BACKGROUND_DISABLED};
            }}
        """


def required_label_html(text: str, hint: str = "*required") -> str:
    """Build label rich text with a red required marker."""
    return f'{text} <span style="color: {AccessiblePalette.REQUIRED_MARKER};">{hint}</span>'


def refresh_style(widget: StyleableWidget) -> None:
    """Re-polish a widget so dynamic property selectors apply."""
    widget.style().unpolish(widget)
    widget.style().polish(widget)


def get_common_form_layout_config() -> dict[str, Any]:
    """
    Get common configuration for form layouts.

    Returns:
        Dictionary with layout configuration parameters
    """
    return {
        "margins": (16, 16, 16, 16),
        "spacing": 6,
        "minimum_width": 420,
    }
