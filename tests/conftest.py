"""
Pytest configuration for ensuring the project root is on sys.path.

This allows test modules to import the in-repo package layout like:
    from user_directory.ui_logic import UserStore

Without relying on external environment variables. Shared fixtures build
stores and controllers over in-memory storage.
"""

import os
import sys

import pytest

# Insert the repository root (one directory up from tests/) at the
# beginning of sys.path to prioritize local modules over site-packages.
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from user_directory.app_config import AppConfig  # noqa: E402
from user_directory.models import AddressDraft, UserDraft  # noqa: E402
from user_directory.storage import MemoryStorage  # noqa: E402
from user_directory.ui_logic import (  # noqa: E402
    FormSession,
    TableController,
    UserStore,
    ValidationManager,
)


class FakeClock:
    """Millisecond clock that advances by one on every call."""

    def __init__(self, start: int = 1_700_000_000_000) -> None:
        self.now = start

    def __call__(self) -> int:
        value = self.now
        self.now += 1
        return value


@pytest.fixture
def config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def store(storage) -> UserStore:
    s = UserStore(storage, clock=FakeClock())
    s.load()
    return s


@pytest.fixture
def validator(config) -> ValidationManager:
    return ValidationManager(config)


@pytest.fixture
def form(store, validator, config) -> FormSession:
    return FormSession(store, validator, config)


@pytest.fixture
def table(store, config) -> TableController:
    return TableController(store, config)


def make_draft(**overrides) -> UserDraft:
    """Valid draft for Ann Lee; keyword overrides replace top-level or address fields."""
    address_fields = {"line1", "line2", "state", "city", "pin"}
    address = AddressDraft(line1="1 Main St", line2="", state="Karnataka", city="Bangalore", pin="560001")
    draft = UserDraft(
        name="Ann Lee",
        email="ann@x.com",
        linkedin_url="https://linkedin.com/in/ann",
        gender="Female",
        address=address,
    )
    for key, value in overrides.items():
        if key in address_fields:
            setattr(draft.address, key, value)
        else:
            setattr(draft, key, value)
    return draft


@pytest.fixture
def ann_draft() -> UserDraft:
    return make_draft()
