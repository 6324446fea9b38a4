"""User Directory source package.

Exports the record types and reference data helpers for convenient imports.
The stateful controllers live in `user_directory.ui_logic`.
"""

from .models import Address, AddressDraft, Gender, User, UserDraft
from .reference_data import ReferenceData, get_cities_by_state, get_states

__all__ = [
    "Address",
    "AddressDraft",
    "Gender",
    "User",
    "UserDraft",
    "ReferenceData",
    "get_cities_by_state",
    "get_states",
]
