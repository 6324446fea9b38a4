"""
Framework-agnostic table presentation state.

Tracks which rows are expanded and which user, if any, is awaiting delete
confirmation. Also builds the display rows, footer and prompts the table
renders, so front ends only lay them out.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Set
import logging

from ..app_config import AppConfig
from ..models import User
from .user_store import USERS_CHANGED, UserStore

logger = logging.getLogger(__name__)


@dataclass
class AddressDetail:
    """A labelled address line shown when a row is expanded."""
    label: str
    value: str


@dataclass
class UserRow:
    """Display model for one table row."""
    user: User
    initial: str
    location: str
    pin_line: str
    expanded: bool = False
    address_details: List[AddressDetail] = field(default_factory=list)


class TableController:
    """Row expansion and delete confirmation for the user table."""

    def __init__(self, store: UserStore, config: AppConfig):
        self.store = store
        self.config = config
        self._expanded: Set[str] = set()
        self._pending_delete: Optional[User] = None
        self.store.add_listener(USERS_CHANGED, self._on_users_changed)

    @property
    def can_edit(self) -> bool:
        return self.config.features.editable_users

    @property
    def can_delete(self) -> bool:
        return self.config.features.deletable_users

    @property
    def is_loading(self) -> bool:
        return not self.store.is_hydrated

    @property
    def is_empty(self) -> bool:
        return self.store.is_hydrated and not self.store.list_users()

    @property
    def pending_delete(self) -> Optional[User]:
        return self._pending_delete

    @property
    def expanded_ids(self) -> Set[str]:
        return set(self._expanded)

    def toggle_expand(self, user_id: str) -> bool:
        """Flip a row's expansion and return the new state."""
        if user_id in self._expanded:
            self._expanded.discard(user_id)
            return False
        self._expanded.add(user_id)
        return True

    def is_expanded(self, user_id: str) -> bool:
        return user_id in self._expanded

    def request_delete(self, user: User) -> None:
        if not self.can_delete:
            logger.warning(f"Delete of {user.id} ignored: deleting users is disabled")
            return
        self._pending_delete = user

    def confirm_delete(self) -> bool:
        """Delete the pending user. Returns False if nothing was pending."""
        pending = self._pending_delete
        if pending is None:
            return False
        self.store.delete(pending.id)
        self._pending_delete = None
        return True

    def cancel_delete(self) -> None:
        self._pending_delete = None

    def delete_prompt(self) -> str:
        if self._pending_delete is None:
            return ""
        return f"{self.config.label('deleteConfirmMessage')} {self._pending_delete.name}?"

    def rows(self) -> List[UserRow]:
        return [self._build_row(u) for u in self.store.list_users()]

    def footer_text(self) -> str:
        count = len(self.store.list_users())
        noun = self.config.label("user") if count == 1 else self.config.label("users")
        return f"{self.config.label('showingUsers')} {count} {noun}"

    def _build_row(self, user: User) -> UserRow:
        a = user.address
        na = self.config.label("addressLabels.notAvailable", "N/A")
        labels = [
            ("addressLabels.line1", a.line1),
            ("addressLabels.line2", a.line2),
            ("addressLabels.city", a.city),
            ("addressLabels.state", a.state),
            ("addressLabels.pin", a.pin),
        ]
        return UserRow(
            user=user,
            initial=user.name[:1].upper(),
            location=f"{a.city}, {a.state}",
            pin_line=f"{self.config.label('pin')}: {a.pin}",
            expanded=self.is_expanded(user.id),
            address_details=[AddressDetail(self.config.label(key), value or na) for key, value in labels],
        )

    def _on_users_changed(self, users: List[User]) -> None:
        ids = {u.id for u in users}
        self._expanded &= ids
        if self._pending_delete is not None and self._pending_delete.id not in ids:
            self._pending_delete = None


__all__ = ["AddressDetail", "TableController", "UserRow"]
