"""
In-memory record store.

:class:`MemStore` is the single authoritative holder of all entity state.
It is an ordinary object: the application factory builds one at startup
and hands it to request handlers through a FastAPI dependency, and tests
build their own isolated instances.

Collections::

    MemStore
    ├── pages            PageCollection          keyed by page_name
    ├── team_members     RecordCollection[TeamMember]
    ├── sprints          RecordCollection[Sprint]
    ├── quick_nav_items  RecordCollection[QuickNavItem]
    └── users            UserCollection

Every operation is a dict operation under the collection's lock.  Id
counters are per collection, start at 1 and never hand out an id twice,
even after deletes.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import fields, replace
from datetime import datetime
from typing import Any

from pilothub.core.errors import ConflictError
from pilothub.core.logging import get_logger
from pilothub.core.timestamps import utc_now
from pilothub.store.models import (
    PageContent,
    PageContentDraft,
    PageContentPatch,
    Patch,
    QuickNavItem,
    Sprint,
    TeamMember,
    User,
    UserDraft,
    record_from_draft,
)

logger = get_logger(__name__)


def _detached[R](record: R) -> R:
    """Copy of *record* whose list fields are fresh lists."""
    lists = {}
    for f in fields(record):  # type: ignore[arg-type]
        value = getattr(record, f.name)
        if isinstance(value, list):
            lists[f.name] = list(value)
    return replace(record, **lists) if lists else record  # type: ignore[type-var]


class RecordCollection[R]:
    """Integer-keyed collection with a monotonically increasing id counter.

    All access goes through ``_lock``; handlers run in a threadpool, so id
    allocation and read-modify-write updates must not interleave.  Records
    handed out carry their own copies of list fields.

    Parameters
    ----------
    record_type:
        Frozen dataclass with an ``id`` field plus the fields of its draft.
    """

    def __init__(self, record_type: type[R]) -> None:
        self.record_type = record_type
        self._records: dict[int, R] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def get(self, record_id: int) -> R | None:
        with self._lock:
            record = self._records.get(record_id)
        return None if record is None else _detached(record)

    def list(self) -> list[R]:
        """All records, in insertion order."""
        with self._lock:
            records = list(self._records.values())
        return [_detached(r) for r in records]

    def create(self, draft: Any) -> R:
        with self._lock:
            record_id = self._next_id
            self._next_id += 1
            record = record_from_draft(self.record_type, record_id, draft)
            self._records[record_id] = record
        return _detached(record)

    def update(self, record_id: int, patch: Patch) -> R | None:
        """Merge *patch* onto an existing record; ``None`` if the id is unknown."""
        with self._lock:
            existing = self._records.get(record_id)
            if existing is None:
                return None
            updated = patch.apply(existing)
            self._records[record_id] = updated
        return _detached(updated)

    def delete(self, record_id: int) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None


class PageCollection:
    """Page content keyed by ``page_name``.

    Every create and update stamps ``last_updated`` from *clock*; updates
    also bump ``version`` by exactly one.  There is no delete.  The clock is
    read inside the lock so concurrent updates see each other's version.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self._clock = clock
        self._pages: dict[str, PageContent] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._pages)

    def get(self, page_name: str) -> PageContent | None:
        with self._lock:
            return self._pages.get(page_name)

    def list(self) -> list[PageContent]:
        with self._lock:
            return list(self._pages.values())

    def create(self, draft: PageContentDraft) -> PageContent:
        """Store a new page; an existing page with the same name is replaced."""
        with self._lock:
            if draft.page_name in self._pages:
                logger.warning("page.replaced", page_name=draft.page_name)
            page = PageContent(
                page_name=draft.page_name,
                title=draft.title,
                subtitle=draft.subtitle,
                content=draft.content,
                last_updated=self._clock(),
                version=1,
            )
            self._pages[draft.page_name] = page
            return page

    def update(self, page_name: str, patch: PageContentPatch) -> PageContent | None:
        with self._lock:
            existing = self._pages.get(page_name)
            if existing is None:
                return None
            updated = patch.apply(
                existing,
                last_updated=self._clock(),
                version=existing.version + 1,
            )
            self._pages[page_name] = updated
            return updated


class UserCollection(RecordCollection[User]):
    """Users are id-keyed and additionally unique by username."""

    def __init__(self) -> None:
        super().__init__(User)

    def get_by_username(self, username: str) -> User | None:
        with self._lock:
            for user in self._records.values():
                if user.username == username:
                    return user
        return None

    def create(self, draft: UserDraft) -> User:
        with self._lock:
            if self.get_by_username(draft.username) is not None:
                raise ConflictError(f"Username '{draft.username}' already exists")
            return super().create(draft)


class MemStore:
    """Process-scoped store holding every collection."""

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self.pages = PageCollection(clock=clock)
        self.team_members: RecordCollection[TeamMember] = RecordCollection(TeamMember)
        self.sprints: RecordCollection[Sprint] = RecordCollection(Sprint)
        self.quick_nav_items: RecordCollection[QuickNavItem] = RecordCollection(QuickNavItem)
        self.users = UserCollection()

    @classmethod
    def with_defaults(
        cls,
        *,
        admin_username: str = "admin",
        admin_password: str = "admin123",
        clock: Callable[[], datetime] = utc_now,
    ) -> MemStore:
        """Build a store loaded with the default pages, team, sprints and admin user."""
        from pilothub.store.seed import load_defaults

        store = cls(clock=clock)
        load_defaults(store, admin_username=admin_username, admin_password=admin_password)
        return store

    def counts(self) -> dict[str, int]:
        """Record count per collection (used by startup logging)."""
        return {
            "pages": len(self.pages),
            "team_members": len(self.team_members),
            "sprints": len(self.sprints),
            "quick_nav_items": len(self.quick_nav_items),
            "users": len(self.users),
        }
