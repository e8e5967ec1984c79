"""
Tests for the form state record and the change handler.
"""

import pytest

from core.errors import ErrorCode, ValidationError
from core.form_state import FIELD_CONTROL_KINDS, FIELD_NAMES, ControlKind, FormState, apply_change


class TestFormState:
    """Test the FormState dataclass."""

    def test_initial_state_is_empty(self):
        """Test the initial values of every field."""
        state = FormState()

        assert state.full_name == ""
        assert state.email == ""
        assert state.phone == ""
        assert state.position == ""
        assert state.portfolio == ""
        assert state.experience == ""
        assert state.skills == set()
        assert state.cover_letter == ""
        assert state.terms is False
        assert state.is_empty()

    def test_instances_do_not_share_skills(self):
        """Test that each state gets its own skills set."""
        first = FormState()
        second = FormState()
        first.skills.add("HTML")
        assert second.skills == set()

    def test_copy_is_independent(self):
        """Test that copies do not alias the skills set."""
        state = FormState(full_name="Jane", skills={"HTML"})
        snapshot = state.copy()

        state.skills.add("CSS")
        state.full_name = "John"

        assert snapshot == FormState(full_name="Jane", skills={"HTML"})

    def test_clear_resets_in_place(self):
        """Test that clear keeps the same object but empties it."""
        state = FormState(full_name="Jane", skills={"HTML", "CSS"}, terms=True)
        skills_before = state.skills

        state.clear()

        assert state.is_empty()
        assert state == FormState()
        # A fresh set, so earlier references cannot leak back in
        skills_before.add("React")
        assert state.skills == set()

    def test_field_names_in_display_order(self):
        """Test the field name tuple."""
        assert FIELD_NAMES == (
            "full_name",
            "email",
            "phone",
            "position",
            "portfolio",
            "experience",
            "skills",
            "cover_letter",
            "terms",
        )
        assert set(FIELD_CONTROL_KINDS) == set(FIELD_NAMES)


class TestApplyChangeText:
    """Test text-like controls."""

    def test_text_replaces_value(self):
        """Test that text controls replace the value as-is."""
        state = FormState()
        result = apply_change(state, "full_name", "  Jane  ", ControlKind.TEXT)

        assert result is state
        assert state.full_name == "  Jane  "

    def test_text_never_validates(self):
        """Test that invalid values are still stored."""
        state = FormState()
        apply_change(state, "phone", "abc", ControlKind.TEXT)
        apply_change(state, "cover_letter", "x" * 500, ControlKind.TEXT)

        assert state.phone == "abc"
        assert len(state.cover_letter) == 500

    def test_none_becomes_empty_string(self):
        """Test that a cleared control stores an empty string."""
        state = FormState(email="a@b.c")
        apply_change(state, "email", None, ControlKind.TEXT)
        assert state.email == ""

    def test_only_named_field_changes(self):
        """Test that a change touches a single field."""
        state = FormState(email="a@b.c")
        apply_change(state, "portfolio", "https://x.y", ControlKind.TEXT)
        assert state == FormState(email="a@b.c", portfolio="https://x.y")


class TestApplyChangeSelect:
    """Test single-select controls."""

    def test_select_replaces_value(self):
        """Test that the selected option string is stored."""
        state = FormState()
        apply_change(state, "position", "Backend Developer", ControlKind.SINGLE_SELECT)
        apply_change(state, "experience", "Fresher", ControlKind.SINGLE_SELECT, checked=True)

        assert state.position == "Backend Developer"
        assert state.experience == "Fresher"

    def test_reselect_replaces_previous(self):
        """Test that a new radio choice replaces the previous one."""
        state = FormState(experience="Fresher")
        apply_change(state, "experience", "3+ years", ControlKind.SINGLE_SELECT, checked=True)
        assert state.experience == "3+ years"

    def test_placeholder_clears_selection(self):
        """Test that choosing the placeholder stores an empty value."""
        state = FormState(position="Backend Developer")
        apply_change(state, "position", "", ControlKind.SINGLE_SELECT)
        assert state.position == ""


class TestApplyChangeCheckboxes:
    """Test checkbox controls."""

    def test_group_member_checked_adds(self):
        """Test that checking a skill adds it."""
        state = FormState()
        apply_change(state, "skills", "HTML", ControlKind.CHECKBOX_GROUP, checked=True)
        apply_change(state, "skills", "CSS", ControlKind.CHECKBOX_GROUP, checked=True)
        assert state.skills == {"HTML", "CSS"}

    def test_group_member_add_is_idempotent(self):
        """Test that checking twice keeps one entry."""
        state = FormState(skills={"HTML"})
        apply_change(state, "skills", "HTML", ControlKind.CHECKBOX_GROUP, checked=True)
        assert state.skills == {"HTML"}

    def test_group_member_unchecked_removes(self):
        """Test that unchecking removes the skill, and is a no-op when absent."""
        state = FormState(skills={"HTML", "CSS"})
        apply_change(state, "skills", "CSS", ControlKind.CHECKBOX_GROUP, checked=False)
        apply_change(state, "skills", "React", ControlKind.CHECKBOX_GROUP, checked=False)
        assert state.skills == {"HTML"}

    def test_standalone_checkbox(self):
        """Test that the terms checkbox stores its checked state."""
        state = FormState()
        apply_change(state, "terms", None, ControlKind.CHECKBOX, checked=True)
        assert state.terms is True

        apply_change(state, "terms", None, ControlKind.CHECKBOX, checked=False)
        assert state.terms is False


class TestApplyChangeErrors:
    """Test wiring errors in change events."""

    def test_unknown_field(self):
        """Test that unknown fields are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            apply_change(FormState(), "nickname", "JD", ControlKind.TEXT)

        assert exc_info.value.field == "nickname"
        assert exc_info.value.code == ErrorCode.INVALID_INPUT

    @pytest.mark.parametrize(
        "field,kind",
        [
            ("skills", ControlKind.TEXT),
            ("terms", ControlKind.TEXT),
            ("full_name", ControlKind.CHECKBOX),
            ("email", ControlKind.CHECKBOX_GROUP),
        ],
    )
    def test_mismatched_kind(self, field, kind):
        """Test that a control kind must fit the field."""
        state = FormState()
        with pytest.raises(ValidationError):
            apply_change(state, field, "x", kind, checked=True)
        assert state.is_empty()
