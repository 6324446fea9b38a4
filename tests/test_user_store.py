"""
Tests for the user store: hydration, create/update/delete, persistence
and listener notification.
"""

import json

from conftest import FakeClock, make_draft
from user_directory.storage import MemoryStorage
from user_directory.ui_logic import UserStore
from user_directory.ui_logic.user_store import STORAGE_KEY, USERS_CHANGED


def persisted(storage):
    return json.loads(storage.get_item(STORAGE_KEY))


class TestHydration:

    def test_not_hydrated_until_load(self, storage):
        s = UserStore(storage)
        assert s.is_hydrated is False
        assert s.load() == []
        assert s.is_hydrated is True

    def test_missing_key_loads_empty(self):
        s = UserStore(MemoryStorage())
        s.load()
        assert s.list_users() == []

    def test_malformed_json_loads_empty(self):
        s = UserStore(MemoryStorage({STORAGE_KEY: "{oops"}))
        assert s.load() == []
        assert s.is_hydrated

    def test_non_list_loads_empty(self):
        s = UserStore(MemoryStorage({STORAGE_KEY: json.dumps({"id": "1"})}))
        assert s.load() == []

    def test_bad_entry_loads_empty(self):
        s = UserStore(MemoryStorage({STORAGE_KEY: json.dumps([{"id": 5}])}))
        assert s.load() == []

    def test_load_is_idempotent(self, store, ann_draft):
        store.create(ann_draft)
        first = store.load()
        second = store.load()
        assert first == second and len(second) == 1


class TestMutations:

    def test_create_assigns_id_and_persists(self, store, storage, ann_draft):
        user = store.create(ann_draft)
        assert user.id == "1700000000000"
        assert store.list_users() == [user]
        assert persisted(storage) == [user.to_dict()]

    def test_persisted_shape_uses_camel_case(self, store, storage, ann_draft):
        store.create(ann_draft)
        record = persisted(storage)[0]
        assert set(record) == {"id", "name", "email", "linkedinUrl", "gender", "address"}
        assert set(record["address"]) == {"line1", "line2", "state", "city", "pin"}

    def test_ids_unique_even_with_frozen_clock(self, ann_draft):
        s = UserStore(MemoryStorage(), clock=lambda: 42)
        s.load()
        ids = [s.create(make_draft(email=f"u{i}@x.com")).id for i in range(3)]
        assert ids == ["42", "43", "44"]

    def test_create_then_reload_roundtrips(self, storage, ann_draft):
        s = UserStore(storage, clock=FakeClock())
        s.load()
        created = s.create(ann_draft)
        reloaded = UserStore(storage)
        assert reloaded.load() == [created]
        assert created.name == ann_draft.name and created.address.pin == ann_draft.address.pin

    def test_update_replaces_matching_record(self, store, storage, ann_draft):
        user = store.create(ann_draft)
        user.address.city = "Mysore"
        assert store.update(user) is True
        assert store.get(user.id).address.city == "Mysore"
        assert persisted(storage)[0]["address"]["city"] == "Mysore"

    def test_update_unknown_id_is_noop(self, store, storage, ann_draft):
        store.create(ann_draft)
        writes = storage.write_count
        ghost = make_draft(name="Ghost").to_user("nope")
        assert store.update(ghost) is False
        assert storage.write_count == writes
        assert [u.name for u in store.list_users()] == ["Ann Lee"]

    def test_delete_removes_and_persists(self, store, storage, ann_draft):
        user = store.create(ann_draft)
        assert store.delete(user.id) is True
        assert store.list_users() == []
        assert persisted(storage) == []

    def test_delete_unknown_id_still_writes(self, store, storage, ann_draft):
        store.create(ann_draft)
        before = store.list_users()
        writes = storage.write_count
        assert store.delete("missing") is False
        assert store.list_users() == before
        assert storage.write_count == writes + 1

    def test_list_users_is_a_copy(self, store, ann_draft):
        store.create(ann_draft)
        store.list_users().clear()
        assert len(store.list_users()) == 1


class TestListeners:

    def test_listener_called_on_each_change(self, store, ann_draft):
        seen = []
        store.add_listener(USERS_CHANGED, lambda users: seen.append(len(users)))
        user = store.create(ann_draft)
        store.update(user)
        store.delete(user.id)
        store.load()
        assert seen == [1, 1, 0, 0]

    def test_removed_listener_not_called(self, store, ann_draft):
        seen = []
        cb = lambda users: seen.append(users)  # noqa: E731
        store.add_listener(USERS_CHANGED, cb)
        store.remove_listener(USERS_CHANGED, cb)
        store.remove_listener(USERS_CHANGED, cb)
        store.create(ann_draft)
        assert seen == []

    def test_failing_listener_does_not_break_store(self, store, ann_draft):
        def boom(users):
            raise RuntimeError("listener failure")

        store.add_listener(USERS_CHANGED, boom)
        user = store.create(ann_draft)
        assert store.get(user.id) is not None
