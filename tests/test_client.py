"""Tests for ``pilothub.client.PilotHubClient`` against the real app."""

from __future__ import annotations

import pytest

from pilothub.client import PilotHubClient
from pilothub.core.errors import ClientError
from pilothub.store.models import PageContentDraft, PageContentPatch


@pytest.fixture()
def hub(client) -> PilotHubClient:
    return PilotHubClient("http://testserver/api", http=client)


class TestReads:
    def test_list_pages(self, hub):
        assert len(hub.list_pages()) == 8

    def test_reads_are_cached(self, hub, store):
        assert hub.get_page("home")["title"] == "Project Documentation Hub"
        store.pages.update("home", PageContentPatch(title="Changed behind the cache"))
        assert hub.get_page("home")["title"] == "Project Documentation Hub"

    def test_invalidate(self, hub, store):
        hub.get_page("home")
        store.pages.update("home", PageContentPatch(title="Fresh"))
        hub.invalidate("/pages")
        assert hub.get_page("home")["title"] == "Fresh"

    def test_not_found_raises(self, hub):
        with pytest.raises(ClientError) as exc_info:
            hub.get_page("nope")
        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Page not found"


class TestPageWrites:
    def test_update_invalidates_cache(self, hub):
        assert hub.get_page("home")["version"] == 1
        updated = hub.update_page("home", title="Hello")
        assert updated["version"] == 2
        assert hub.get_page("home")["title"] == "Hello"

    def test_update_skips_unset_fields(self, hub):
        before = hub.get_page("team")
        after = hub.update_page("team", title=None, subtitle="New subtitle")
        assert after["title"] == before["title"]
        assert after["subtitle"] == "New subtitle"

    def test_page_payload(self, hub):
        payload = hub.page_payload("home")
        assert payload["intro"]["title"] == "Welcome to Project Pilots"

    def test_page_name_is_url_encoded(self, hub, store):
        store.pages.create(PageContentDraft(page_name="faq?draft#1", title="FAQ", content="{}"))
        assert hub.get_page("faq?draft#1")["title"] == "FAQ"
        updated = hub.update_page("faq?draft#1", title="FAQ v2")
        assert updated["pageName"] == "faq?draft#1"
        assert hub.get_page("faq?draft#1")["version"] == 2

    def test_page_payload_bad_json(self, hub, store):
        store.pages.create(PageContentDraft(page_name="raw", title="Raw", content="not json"))
        with pytest.raises(ClientError) as exc_info:
            hub.page_payload("raw")
        assert exc_info.value.status_code is None


class TestRecords:
    def test_create_invalidates_collection(self, hub):
        assert len(hub.list_records("sprints")) == 6
        created = hub.create_record("sprints", {"name": "Sprint 7", "dateRange": "W13", "status": "Planned"})
        assert created["id"] == 7
        assert len(hub.list_records("sprints")) == 7

    def test_update_record(self, hub):
        hub.get_record("team-members", 3)
        hub.update_record("team-members", 3, {"role": "Design Lead"})
        assert hub.get_record("team-members", 3)["role"] == "Design Lead"

    def test_delete_record(self, hub):
        assert hub.delete_record("quick-nav-items", 1) is None
        with pytest.raises(ClientError) as exc_info:
            hub.get_record("quick-nav-items", 1)
        assert exc_info.value.status_code == 404

    def test_validation_error_message(self, hub):
        with pytest.raises(ClientError) as exc_info:
            hub.create_record("team-members", {})
        assert exc_info.value.status_code == 400
        assert exc_info.value.message.startswith("Validation error")


class TestLogin:
    def test_login(self, hub):
        assert hub.login("admin", "admin123") == {"success": True, "userId": 1}

    def test_login_rejected(self, hub):
        with pytest.raises(ClientError) as exc_info:
            hub.login("admin", "bad")
        assert exc_info.value.status_code == 401


class TestLifecycle:
    def test_borrowed_http_not_closed(self, client):
        with PilotHubClient("http://testserver/api", http=client) as hub:
            hub.list_pages()
        assert client.get("/api/health").status_code == 200

    def test_connection_error_wrapped(self):
        with PilotHubClient("http://127.0.0.1:9/api", timeout=0.5) as hub:
            with pytest.raises(ClientError) as exc_info:
                hub.list_pages()
        assert exc_info.value.status_code is None
