"""UI components package for the User Directory Streamlit application.

Each component inherits from `BaseComponent` and implements `render()`
to draw its part of the page from the shared `DirectorySession`.
"""

from .base_component import BaseComponent  # re-export for convenience

__all__ = [
    "BaseComponent",
]
