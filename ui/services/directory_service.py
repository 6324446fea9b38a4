from __future__ import annotations

"""Directory export service.

Flattens the current user list into a pandas DataFrame for display and CSV
download. All tabular conversion is localized here to keep UI components
free of pandas details.
"""

from typing import List

import pandas as pd

from user_directory.models import User
from user_directory.ui_logic import UserStore


EXPORT_COLUMNS: List[str] = [
    "Name",
    "Email",
    "LinkedIn",
    "Gender",
    "Address Line 1",
    "Address Line 2",
    "City",
    "State",
    "PIN",
]


class DirectoryService:
    """Read-only tabular views over the user store."""

    def __init__(self, store: UserStore) -> None:
        self.store = store

    @staticmethod
    def _row(user: User) -> List[str]:
        a = user.address
        return [user.name, user.email, user.linkedin_url, user.gender, a.line1, a.line2, a.city, a.state, a.pin]

    def to_dataframe(self) -> pd.DataFrame:
        rows = [self._row(u) for u in self.store.list_users()]
        return pd.DataFrame(rows, columns=EXPORT_COLUMNS)

    def export_csv(self) -> str:
        """Return the directory as CSV text (header row always present)."""
        return self.to_dataframe().to_csv(index=False)


__all__ = ["DirectoryService", "EXPORT_COLUMNS"]
