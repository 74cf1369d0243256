"""Tests for request payload validation models."""

from __future__ import annotations

import pytest

from pilothub.core.errors import ValidationError
from pilothub.schemas.records import (
    PageContentCreate,
    PageContentUpdate,
    QuickNavItemCreate,
    SprintCreate,
    SprintUpdate,
    TeamMemberCreate,
    TeamMemberUpdate,
    validate_payload,
)
from pilothub.store.models import SprintPatch


class TestCreateModels:
    def test_team_member_missing_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(TeamMemberCreate, {})
        err = exc_info.value
        assert err.message == (
            'Validation error: Field required at "name"; '
            'Field required at "role"; '
            'Field required at "initials"'
        )
        assert [e["field"] for e in err.errors] == ["name", "role", "initials"]
        assert {e["code"] for e in err.errors} == {"missing"}

    def test_sprint_accepts_camel_case(self):
        model = validate_payload(
            SprintCreate,
            {"name": "Sprint 7", "dateRange": "Week 13", "status": "Planned"},
        )
        draft = model.to_draft()
        assert draft.date_range == "Week 13"
        assert draft.deliverables == []
        assert draft.subtitle is None

    def test_sprint_missing_date_range_uses_wire_name(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(SprintCreate, {"name": "S", "status": "Planned"})
        assert exc_info.value.errors[0]["field"] == "dateRange"

    def test_wrong_type(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(QuickNavItemCreate, {"name": 5, "icon": "x", "link": "/y"})
        assert exc_info.value.errors[0]["code"] == "string_type"
        assert exc_info.value.errors[0]["field"] == "name"

    def test_list_element_path(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(TeamMemberCreate, {"name": "a", "role": "b", "initials": "c", "skills": ["ok", 3]})
        assert exc_info.value.errors[0]["field"] == "skills.1"

    def test_server_owned_fields_dropped(self):
        model = validate_payload(
            QuickNavItemCreate,
            {"id": 99, "name": "Docs", "icon": "book", "link": "/docs"},
        )
        assert not hasattr(model, "id")

    def test_non_object_rejected(self):
        with pytest.raises(ValidationError):
            validate_payload(TeamMemberCreate, ["not", "an", "object"])

    def test_page_create(self):
        draft = validate_payload(
            PageContentCreate, {"pageName": "faq", "title": "FAQ", "content": "{}"}
        ).to_draft()
        assert draft.page_name == "faq"


class TestUpdateModels:
    def test_empty_patch(self):
        patch = validate_payload(SprintUpdate, {}).to_patch()
        assert patch.is_empty()

    def test_null_means_unchanged(self):
        patch = validate_payload(SprintUpdate, {"name": None, "status": "Completed"}).to_patch()
        assert patch.changes() == {"status": "Completed"}

    def test_patch_type_constraints(self):
        with pytest.raises(ValidationError):
            validate_payload(TeamMemberUpdate, {"skills": "not-a-list"})

    def test_page_name_not_patchable(self):
        patch = validate_payload(
            PageContentUpdate,
            {"pageName": "other", "version": 10, "lastUpdated": "x", "title": "T"},
        ).to_patch()
        assert patch.changes() == {"title": "T"}

    def test_patch_is_explicit_value(self):
        patch = validate_payload(SprintUpdate, {"dateRange": "W2"}).to_patch()
        assert patch == SprintPatch(date_range="W2")
