"""Tests for ``pilothub.store.memory``: the in-memory record store."""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, datetime

import pytest

from pilothub.core.errors import ConflictError
from pilothub.store.memory import MemStore, RecordCollection, UserCollection
from pilothub.store.models import (
    PageContentDraft,
    PageContentPatch,
    Sprint,
    SprintDraft,
    SprintPatch,
    TeamMemberPatch,
    UserDraft,
)


def _sprint(name: str = "Sprint X") -> SprintDraft:
    return SprintDraft(name=name, date_range="Week 1", status="Planned")


class TestRecordCollection:
    def setup_method(self):
        self.sprints: RecordCollection[Sprint] = RecordCollection(Sprint)

    def test_ids_start_at_one(self):
        assert self.sprints.create(_sprint()).id == 1
        assert self.sprints.create(_sprint()).id == 2

    def test_ids_not_reused_after_delete(self):
        first = self.sprints.create(_sprint())
        assert self.sprints.delete(first.id) is True
        assert self.sprints.create(_sprint()).id == 2

    def test_list_in_insertion_order(self):
        for name in ("a", "b", "c"):
            self.sprints.create(_sprint(name))
        assert [s.name for s in self.sprints.list()] == ["a", "b", "c"]

    def test_get_missing(self):
        assert self.sprints.get(42) is None

    def test_update_merges_present_fields(self):
        sprint = self.sprints.create(SprintDraft(name="S", date_range="W1", status="Planned", subtitle="sub"))
        updated = self.sprints.update(sprint.id, SprintPatch(status="Completed"))
        assert updated.status == "Completed"
        assert updated.name == "S"
        assert updated.subtitle == "sub"
        assert self.sprints.get(sprint.id) == updated

    def test_update_unknown_returns_none(self):
        assert self.sprints.update(9, SprintPatch(name="x")) is None
        assert len(self.sprints) == 0

    def test_delete_twice(self):
        sprint = self.sprints.create(_sprint())
        assert self.sprints.delete(sprint.id) is True
        assert self.sprints.delete(sprint.id) is False

    def test_draft_lists_are_copied(self):
        deliverables = ["a"]
        sprint = self.sprints.create(
            SprintDraft(name="S", date_range="W", status="Planned", deliverables=deliverables)
        )
        deliverables.append("b")
        assert sprint.deliverables == ["a"]

    def test_returned_lists_are_copies(self):
        sprint = self.sprints.create(
            SprintDraft(name="S", date_range="W", status="Planned", deliverables=["a"])
        )
        sprint.deliverables.append("leak")
        self.sprints.get(sprint.id).deliverables.append("leak")
        self.sprints.list()[0].deliverables.append("leak")
        assert self.sprints.get(sprint.id).deliverables == ["a"]


class TestPageCollection:
    def test_create_stamps_version_and_time(self, empty_store, t0):
        page = empty_store.pages.create(PageContentDraft(page_name="p", title="T", content="{}"))
        assert page.version == 1
        assert page.last_updated == t0

    def test_update_bumps_version_and_time(self, empty_store, t0):
        empty_store.pages.create(PageContentDraft(page_name="p", title="T", content="{}", subtitle="s"))
        updated = empty_store.pages.update("p", PageContentPatch(title="New"))
        assert updated.version == 2
        assert updated.title == "New"
        assert updated.subtitle == "s"
        assert updated.content == "{}"
        assert updated.last_updated > t0

    def test_empty_patch_still_bumps_version(self, empty_store):
        empty_store.pages.create(PageContentDraft(page_name="p", title="T", content="{}"))
        assert empty_store.pages.update("p", PageContentPatch()).version == 2

    def test_update_unknown_does_not_create(self, empty_store):
        assert empty_store.pages.update("nope", PageContentPatch(title="x")) is None
        assert empty_store.pages.get("nope") is None

    def test_create_existing_replaces(self, empty_store):
        empty_store.pages.create(PageContentDraft(page_name="p", title="A", content="{}"))
        empty_store.pages.update("p", PageContentPatch(title="B"))
        replaced = empty_store.pages.create(PageContentDraft(page_name="p", title="C", content="[]"))
        assert replaced.version == 1
        assert replaced.title == "C"
        assert len(empty_store.pages) == 1


class TestUserCollection:
    def test_lookup_by_username(self):
        users = UserCollection()
        user = users.create(UserDraft(username="admin", password="pw"))
        assert users.get_by_username("admin") == user
        assert users.get_by_username("ghost") is None

    def test_duplicate_username_rejected(self):
        users = UserCollection()
        users.create(UserDraft(username="admin", password="pw"))
        with pytest.raises(ConflictError, match="already exists"):
            users.create(UserDraft(username="admin", password="other"))


class TestMemStore:
    def test_empty(self, empty_store):
        assert empty_store.counts() == {
            "pages": 0,
            "team_members": 0,
            "sprints": 0,
            "quick_nav_items": 0,
            "users": 0,
        }

    def test_collections_are_independent(self, empty_store):
        empty_store.sprints.create(_sprint())
        assert empty_store.team_members.update(1, TeamMemberPatch(name="x")) is None

    def test_stores_are_isolated(self):
        a = MemStore()
        b = MemStore()
        a.sprints.create(_sprint())
        assert len(b.sprints) == 0


def _slow_clock() -> datetime:
    time.sleep(0.01)
    return datetime.now(UTC)


class TestConcurrentWrites:
    def test_page_updates_are_serialised(self):
        store = MemStore(clock=_slow_clock)
        store.pages.create(PageContentDraft(page_name="p", title="T", content="{}"))
        n = 16

        with ThreadPoolExecutor(max_workers=n) as pool:
            versions = list(
                pool.map(lambda i: store.pages.update("p", PageContentPatch(title=f"t{i}")).version, range(n))
            )

        assert sorted(versions) == list(range(2, n + 2))
        assert store.pages.get("p").version == 1 + n

    def test_concurrent_updates_keep_every_field(self):
        store = MemStore(clock=_slow_clock)
        store.pages.create(PageContentDraft(page_name="p", title="T", content="{}"))
        patches = [PageContentPatch(title="A"), PageContentPatch(subtitle="B")]

        with ThreadPoolExecutor(max_workers=2) as pool:
            list(pool.map(lambda patch: store.pages.update("p", patch), patches))

        page = store.pages.get("p")
        assert (page.title, page.subtitle, page.version) == ("A", "B", 3)

    def test_concurrent_creates_get_distinct_ids(self):
        sprints: RecordCollection[Sprint] = RecordCollection(Sprint)
        n = 50

        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(lambda i: sprints.create(_sprint(f"s{i}")).id, range(n)))

        assert sorted(ids) == list(range(1, n + 1))
        assert len(sprints) == n
