"""
Framework-agnostic user store.

Holds the canonical, ordered list of users and mirrors every change to
durable key-value storage under the ``"users"`` key as one JSON array.
Writes always replace the whole list. Listeners registered for
``"users_changed"`` are called with the new list after each change.
"""

from typing import Callable, Dict, List, Optional
import json
import logging
import time

from ..models import User, UserDraft
from ..storage import KeyValueStorage

logger = logging.getLogger(__name__)

STORAGE_KEY = "users"
USERS_CHANGED = "users_changed"


def _millis() -> int:
    return int(time.time() * 1000)


class UserStore:
    """
    Canonical list of users backed by durable storage.

    The store does not validate: callers must check drafts with the
    validation manager before calling `create` or `update`.
    """

    def __init__(self, storage: KeyValueStorage, clock: Callable[[], int] = _millis):
        """Initialize an empty, not yet hydrated store.

        Args:
            storage: Durable key-value storage
            clock: Millisecond clock used to generate ids
        """
        self.storage = storage
        self._clock = clock
        self._users: List[User] = []
        self._is_hydrated = False
        self._listeners: Dict[str, List[Callable]] = {}

    @property
    def is_hydrated(self) -> bool:
        """True once `load` has run, whatever it found."""
        return self._is_hydrated

    def list_users(self) -> List[User]:
        return list(self._users)

    def get(self, user_id: str) -> Optional[User]:
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def load(self) -> List[User]:
        """Replace the in-memory list with the persisted one.

        Missing or malformed content yields an empty list.
        """
        self._users = self._read_persisted()
        self._is_hydrated = True
        logger.info(f"Loaded {len(self._users)} user(s) from storage")
        self._notify_listeners(USERS_CHANGED, self.list_users())
        return self.list_users()

    def create(self, draft: UserDraft) -> User:
        """Append a new user with a freshly generated id."""
        user = draft.to_user(self._next_id())
        self._users.append(user)
        self._persist()
        logger.info(f"Created user {user.id}")
        self._notify_listeners(USERS_CHANGED, self.list_users())
        return user

    def update(self, user: User) -> bool:
        """Replace the user with the same id. Unknown ids are ignored."""
        for index, existing in enumerate(self._users):
            if existing.id == user.id:
                self._users[index] = user
                self._persist()
                logger.info(f"Updated user {user.id}")
                self._notify_listeners(USERS_CHANGED, self.list_users())
                return True
        logger.warning(f"Ignoring update for unknown user id {user.id!r}")
        return False

    def delete(self, user_id: str) -> bool:
        """Remove the user with this id, then persist whether or not it existed."""
        before = len(self._users)
        self._users = [u for u in self._users if u.id != user_id]
        removed = len(self._users) != before
        self._persist()
        if removed:
            logger.info(f"Deleted user {user_id}")
        else:
            logger.warning(f"Delete requested for unknown user id {user_id!r}")
        self._notify_listeners(USERS_CHANGED, self.list_users())
        return removed

    def add_listener(self, event: str, callback: Callable) -> None:
        """Add a listener for store change events."""
        if event not in self._listeners:
            self._listeners[event] = []
        self._listeners[event].append(callback)

    def remove_listener(self, event: str, callback: Callable) -> None:
        """Remove a listener for store change events."""
        if event in self._listeners:
            try:
                self._listeners[event].remove(callback)
            except ValueError:
                pass

    def _notify_listeners(self, event: str, *args, **kwargs) -> None:
        if event in self._listeners:
            for callback in list(self._listeners[event]):
                try:
                    callback(*args, **kwargs)
                except Exception as e:
                    logger.error(f"Error in store listener callback: {e}")

    def _next_id(self) -> str:
        candidate = self._clock()
        taken = {u.id for u in self._users}
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    def _read_persisted(self) -> List[User]:
        raw = self.storage.get_item(STORAGE_KEY)
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Stored users are not valid JSON, starting empty: {e}")
            return []
        if not isinstance(data, list):
            logger.warning("Stored users are not a list, starting empty")
            return []
        try:
            return [User.from_dict(item) for item in data]
        except ValueError as e:
            logger.warning(f"Stored users are malformed, starting empty: {e}")
            return []

    def _persist(self) -> None:
        payload = json.dumps([u.to_dict() for u in self._users], ensure_ascii=False)
        self.storage.set_item(STORAGE_KEY, payload)


__all__ = ["STORAGE_KEY", "USERS_CHANGED", "UserStore"]
