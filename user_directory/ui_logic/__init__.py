"""
Framework-agnostic business logic for the User Directory UI.

Nothing in this package imports a UI framework. The Streamlit front end in
`ui/` is a thin layer over these classes, and another front end could reuse
them unchanged.

Core pieces:
- UserStore: canonical user list persisted to key-value storage
- ValidationManager: field rules and email uniqueness
- FormSession: add/edit form lifecycle
- TableController: row expansion and delete confirmation
"""

from .user_store import UserStore
from .validation_manager import ValidationManager
from .form_session import FormMode, FormSession
from .table_controller import TableController

__all__ = [
    "UserStore",
    "ValidationManager",
    "FormMode",
    "FormSession",
    "TableController",
]
