"""Service layer for the User Directory UI.

These services encapsulate tabular export concerns so UI components can
remain thin and focused on presentation.
"""

from .directory_service import DirectoryService

__all__ = [
    "DirectoryService",
]
