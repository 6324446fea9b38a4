from __future__ import annotations

"""
Session wiring for the Streamlit GUI.

One `DirectorySession` is created per browser session and kept in
`st.session_state`; it owns the user store and the controllers built on it,
so components receive the store handle explicitly instead of reaching for a
module-level singleton. This module has no Streamlit import to keep it
testable.
"""

from dataclasses import dataclass
import logging
import os
from pathlib import Path
from typing import Optional

from user_directory.app_config import AppConfig, load_app_config
from user_directory.io_paths import DEFAULT_CONFIG_FILE, DEFAULT_STORAGE_FILE
from user_directory.reference_data import DEFAULT_REFERENCE_DATA, ReferenceData
from user_directory.storage import JsonFileStorage, KeyValueStorage
from user_directory.ui_logic import FormSession, TableController, UserStore, ValidationManager

logger = logging.getLogger(__name__)

CONFIG_ENV = "USER_DIRECTORY_CONFIG"
STORAGE_ENV = "USER_DIRECTORY_STORAGE"
DEBUG_ENV = "USER_DIRECTORY_DEBUG"


@dataclass
class DirectorySession:
    """Everything one UI session needs, wired together."""

    config: AppConfig
    reference_data: ReferenceData
    store: UserStore
    validator: ValidationManager
    form: FormSession
    table: TableController


def resolve_config_path() -> Path:
    return Path(os.environ.get(CONFIG_ENV) or DEFAULT_CONFIG_FILE)


def resolve_storage_path() -> Path:
    return Path(os.environ.get(STORAGE_ENV) or DEFAULT_STORAGE_FILE)


def debug_enabled() -> bool:
    return os.environ.get(DEBUG_ENV, "").strip().lower() in {"1", "true", "yes", "on"}


def build_session(
    config: Optional[AppConfig] = None,
    storage: Optional[KeyValueStorage] = None,
    reference_data: Optional[ReferenceData] = None,
    hydrate: bool = True,
) -> DirectorySession:
    """Wire store and controllers together.

    Defaults read the YAML config and the JSON storage file resolved from
    the environment. With `hydrate=True` the store is loaded immediately.
    """
    cfg = config if config is not None else load_app_config(resolve_config_path())
    ref = reference_data or DEFAULT_REFERENCE_DATA
    if storage is None:
        storage = JsonFileStorage(resolve_storage_path())
        logger.info(f"Using storage file {storage.path}")
    store = UserStore(storage)
    validator = ValidationManager(cfg, ref)
    session = DirectorySession(
        config=cfg,
        reference_data=ref,
        store=store,
        validator=validator,
        form=FormSession(store, validator, cfg, ref),
        table=TableController(store, cfg),
    )
    if hydrate:
        store.load()
    return session


__all__ = [
    "DirectorySession",
    "build_session",
    "debug_enabled",
    "resolve_config_path",
    "resolve_storage_path",
]
