"""In-memory record store.

Quick start::

    from pilothub.store import MemStore

    store = MemStore.with_defaults()
    store.pages.get("home")
"""

from pilothub.store.memory import MemStore, PageCollection, RecordCollection, UserCollection

__all__ = ["MemStore", "PageCollection", "RecordCollection", "UserCollection"]
