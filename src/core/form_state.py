"""
Form state for the Job Application Form.

This module defines the mutable record holding the current user input and
the change handler that applies one control event to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any

from .errors import ErrorCode, ValidationError


class ControlKind(Enum):
    """
    Widget categories that can change a form field.

    The kind decides how a raw change event updates the FormState.
    """

    TEXT = "text"  # line edits, url/email inputs, text areas
    SINGLE_SELECT = "single_select"  # combo boxes and radio groups
    CHECKBOX_GROUP = "checkbox_group"  # one member of a multi-select group
    CHECKBOX = "checkbox"  # standalone boolean checkbox


@dataclass
class FormState:
    """Complete snapshot of all field values and selections."""

    full_name: str = ""
    email: str = ""
    phone: str = ""
    position: str = ""
    portfolio: str = ""
    experience: str = ""
    skills: set[str] = field(default_factory=set)
    cover_letter: str = ""
    terms: bool = False

    def copy(self) -> FormState:
        """Return an independent snapshot of this state."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values["skills"] = set(self.skills)
        return FormState(**values)

    def is_empty(self) -> bool:
        """Check whether the state equals the initial empty state."""
        return self == FormState()

    def clear(self) -> None:
        """Reset every field to its initial empty value in place."""
        initial = FormState()
        for f in fields(self):
            setattr(self, f.name, getattr(initial, f.name))


# Field names in display order; ErrorMap keys are always drawn from these
FIELD_NAMES: tuple[str, ...] = tuple(f.name for f in fields(FormState))

# Control kinds each field accepts
FIELD_CONTROL_KINDS: dict[str, ControlKind] = {
    "full_name": ControlKind.TEXT,
    "email": ControlKind.TEXT,
    "phone": ControlKind.TEXT,
    "position": ControlKind.SINGLE_SELECT,
    "portfolio": ControlKind.TEXT,
    "experience": ControlKind.SINGLE_SELECT,
    "skills": ControlKind.CHECKBOX_GROUP,
    "cover_letter": ControlKind.TEXT,
    "terms": ControlKind.CHECKBOX,
}


def apply_change(
    state: FormState,
    field_name: str,
    raw_value: Any,
    kind: ControlKind,
    checked: bool = False,
) -> FormState:
    """
    Apply one control event to the form state.

    The state is mutated in place and returned. Values are stored as
    received; trimming and validation happen only at validation time.

    Args:
        state: The form state to update
        field_name: Name of the field the control is bound to
        raw_value: The control's value (option string for group members)
        kind: The kind of control that emitted the event
        checked: New checked state for checkbox controls

    Returns:
        The same FormState instance

    Raises:
        ValidationError: If the field is unknown or the control kind does not
            match the field
    """
    expected_kind = FIELD_CONTROL_KINDS.get(field_name)
    if expected_kind is None:
        raise ValidationError(
            code=ErrorCode.INVALID_INPUT,
            user_message=f"Unknown form field: {field_name}",
            field=field_name,
        )

    # Text inputs and selection controls both replace the stored string
    compatible = {ControlKind.TEXT, ControlKind.SINGLE_SELECT}
    if kind != expected_kind and not (kind in compatible and expected_kind in compatible):
        raise ValidationError(
            code=ErrorCode.INVALID_INPUT,
            user_message=f"Control kind '{kind.value}' cannot change field '{field_name}'",
            field=field_name,
            context={"expected_kind": expected_kind.value},
        )

    if kind == ControlKind.CHECKBOX_GROUP:
        selected: set[str] = getattr(state, field_name)
        if checked:
            selected.add(raw_value)
        else:
            selected.discard(raw_value)
    elif kind == ControlKind.CHECKBOX:
        setattr(state, field_name, bool(checked))
    else:
        setattr(state, field_name, "" if raw_value is None else str(raw_value))

    return state
