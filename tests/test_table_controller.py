"""Tests for row expansion, delete confirmation and table view models."""

from conftest import make_draft
from user_directory.app_config import app_config_from_dict
from user_directory.storage import MemoryStorage
from user_directory.ui_logic import TableController, UserStore


class TestExpansion:

    def test_toggle_expand(self, table, store, ann_draft):
        user = store.create(ann_draft)
        assert table.toggle_expand(user.id) is True
        assert table.is_expanded(user.id)
        assert table.toggle_expand(user.id) is False
        assert not table.is_expanded(user.id)

    def test_deleted_rows_are_pruned(self, table, store, ann_draft):
        user = store.create(ann_draft)
        table.toggle_expand(user.id)
        store.delete(user.id)
        assert table.expanded_ids == set()


class TestDeleteFlow:

    def test_confirm_delete(self, table, store, storage, ann_draft):
        user = store.create(ann_draft)
        table.request_delete(user)
        assert table.pending_delete is user
        assert table.delete_prompt() == "Are you sure you want to delete Ann Lee?"
        assert table.confirm_delete() is True
        assert table.pending_delete is None
        assert store.list_users() == []

    def test_cancel_delete_keeps_user(self, table, store, ann_draft):
        user = store.create(ann_draft)
        table.request_delete(user)
        table.cancel_delete()
        assert table.pending_delete is None
        assert table.delete_prompt() == ""
        assert store.list_users() == [user]

    def test_confirm_without_pending_is_noop(self, table, storage):
        writes = storage.write_count
        assert table.confirm_delete() is False
        assert storage.write_count == writes

    def test_delete_disabled_by_feature_toggle(self, ann_draft):
        cfg = app_config_from_dict({"features": {"deletableUsers": False, "editableUsers": False}})
        store = UserStore(MemoryStorage())
        store.load()
        table = TableController(store, cfg)
        user = store.create(ann_draft)
        assert not table.can_edit and not table.can_delete
        table.request_delete(user)
        assert table.pending_delete is None


class TestViewModels:

    def test_loading_then_empty(self, config):
        store = UserStore(MemoryStorage())
        table = TableController(store, config)
        assert table.is_loading and not table.is_empty
        store.load()
        assert not table.is_loading and table.is_empty

    def test_rows(self, table, store, ann_draft):
        user = store.create(ann_draft)
        table.toggle_expand(user.id)
        (row,) = table.rows()
        assert row.initial == "A"
        assert row.location == "Bangalore, Karnataka"
        assert row.pin_line == "PIN: 560001"
        assert row.expanded is True
        details = {d.label: d.value for d in row.address_details}
        assert details["Address Line 1"] == "1 Main St"
        assert details["Address Line 2"] == "N/A"
        assert details["PIN Code"] == "560001"

    def test_footer_pluralisation(self, table, store):
        store.create(make_draft())
        assert table.footer_text() == "Showing 1 user"
        store.create(make_draft(email="bob@x.com"))
        assert table.footer_text() == "Showing 2 users"
