from __future__ import annotations

"""Base component class for the User Directory UI.

All components inherit from `BaseComponent` and implement the `render()`
method. Components receive the session (store plus controllers) through
their constructor to keep them decoupled and testable.
"""

from dataclasses import dataclass

from ui.state import DirectorySession


@dataclass
class BaseComponent:
    """Base class for all UI components.

    Attributes:
        session: Store and controllers for the current browser session
    """

    session: DirectorySession

    def render(self) -> None:
        """Render the component.

        Subclasses must override this method to draw Streamlit widgets
        and route user actions to the controllers.
        """
        raise NotImplementedError("Subclasses must implement render()")

    def text(self, key: str, default: str = "") -> str:
        return self.session.config.label(key, default)
