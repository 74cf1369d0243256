"""Tests for ``pilothub.ops.pages``: page content operations."""

from __future__ import annotations

from pilothub.ops.pages import PAGE_NOT_FOUND, create_page, get_page, list_pages, update_page


class TestListAndGet:
    def test_list(self, ctx):
        result = list_pages(ctx)
        assert result.success
        assert len(result.data) == 8

    def test_get(self, ctx):
        result = get_page(ctx, "home")
        assert result.success
        assert result.data.title == "Project Documentation Hub"

    def test_get_unknown(self, ctx):
        result = get_page(ctx, "does-not-exist")
        assert not result.success
        assert result.error.code == "NOT_FOUND"
        assert result.error.message == PAGE_NOT_FOUND
        assert ctx.store.pages.get("does-not-exist") is None

    def test_list_internal_failure(self, ctx, monkeypatch):
        def boom():
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(ctx.store.pages, "list", boom)
        result = list_pages(ctx)
        assert result.error.code == "INTERNAL"
        assert result.error.message == "Failed to fetch pages"


class TestCreatePage:
    def test_create(self, ctx):
        result = create_page(ctx, {"pageName": "faq", "title": "FAQ", "content": "{}"})
        assert result.success
        assert result.data.version == 1
        assert result.data.last_updated is not None
        assert ctx.store.pages.get("faq") == result.data

    def test_create_invalid(self, ctx):
        result = create_page(ctx, {"title": "No name"})
        assert result.error.code == "VALIDATION_FAILED"
        fields = [d["field"] for d in result.error.details]
        assert fields == ["pageName", "content"]

    def test_create_existing_resets_version(self, ctx):
        update_page(ctx, "home", {"title": "v2"})
        result = create_page(ctx, {"pageName": "home", "title": "Fresh", "content": "{}"})
        assert result.data.version == 1
        assert ctx.store.pages.get("home").title == "Fresh"


class TestUpdatePage:
    def test_partial_update(self, ctx):
        before = ctx.store.pages.get("home")
        result = update_page(ctx, "home", {"title": "Welcome"})
        assert result.success
        page = result.data
        assert page.title == "Welcome"
        assert page.subtitle == before.subtitle
        assert page.content == before.content
        assert page.version == before.version + 1
        assert page.last_updated > before.last_updated

    def test_missing_body_only_bumps_version(self, ctx):
        before = ctx.store.pages.get("home")
        page = update_page(ctx, "home", None).data
        assert page.version == before.version + 1
        assert (page.title, page.content) == (before.title, before.content)

    def test_versions_increase_by_one(self, ctx):
        for expected in (2, 3, 4):
            assert update_page(ctx, "jira", {"subtitle": f"v{expected}"}).data.version == expected

    def test_unknown_page(self, ctx):
        result = update_page(ctx, "nope", {"title": "x"})
        assert result.error.code == "NOT_FOUND"
        assert ctx.store.pages.get("nope") is None

    def test_invalid_body_leaves_page_unchanged(self, ctx):
        before = ctx.store.pages.get("home")
        result = update_page(ctx, "home", {"title": 42})
        assert result.error.code == "VALIDATION_FAILED"
        assert ctx.store.pages.get("home") == before

    def test_page_name_is_immutable(self, ctx):
        result = update_page(ctx, "home", {"pageName": "renamed", "version": 99})
        assert result.data.page_name == "home"
        assert result.data.version == 2
        assert ctx.store.pages.get("renamed") is None
