"""
Framework-agnostic add/edit form session.

The session moves between three modes: CLOSED, CREATE and EDIT. While open it
owns a `UserDraft`, the per-field error map and the city options derived from
the selected state. Input events go through one explicit setter per field,
each of which clears that field's error. `submit` validates the whole draft
and commits it to the user store only when it is clean.
"""

from enum import Enum
from typing import Callable, Dict, List, Optional
import logging
import re

from ..app_config import AppConfig
from ..models import User, UserDraft
from ..reference_data import DEFAULT_REFERENCE_DATA, ReferenceData
from .user_store import UserStore
from .validation_manager import ErrorMap, ValidationManager

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"[^0-9]")


class FormMode(Enum):
    """Enumeration of form session modes."""
    CLOSED = "closed"
    CREATE = "create"
    EDIT = "edit"


class FormSession:
    """Lifecycle of the add/edit user form."""

    def __init__(self, store: UserStore, validator: ValidationManager,
                 config: AppConfig, reference_data: Optional[ReferenceData] = None):
        self.store = store
        self.validator = validator
        self.config = config
        self.reference_data = reference_data or DEFAULT_REFERENCE_DATA
        self._mode = FormMode.CLOSED
        self._editing: Optional[User] = None
        self._draft = UserDraft()
        self._errors: ErrorMap = {}
        self._cities: List[str] = []
        self._setters: Dict[str, Callable[[str], None]] = {
            "name": self.set_name,
            "email": self.set_email,
            "linkedinUrl": self.set_linkedin_url,
            "gender": self.set_gender,
            "line1": self.set_line1,
            "line2": self.set_line2,
            "state": self.set_state,
            "city": self.set_city,
            "pin": self.set_pin,
        }

    @property
    def mode(self) -> FormMode:
        return self._mode

    @property
    def is_open(self) -> bool:
        return self._mode is not FormMode.CLOSED

    @property
    def editing_user(self) -> Optional[User]:
        return self._editing

    @property
    def draft(self) -> UserDraft:
        return self._draft

    @property
    def errors(self) -> ErrorMap:
        return dict(self._errors)

    @property
    def cities(self) -> List[str]:
        return list(self._cities)

    @property
    def states(self) -> List[str]:
        return self.reference_data.list_states()

    @property
    def title(self) -> str:
        if self._mode is FormMode.EDIT:
            return self.config.label("editUserTitle")
        return self.config.label("addUserTitle")

    def error_for(self, field: str) -> str:
        return self._errors.get(field, "")

    def open_for_create(self) -> None:
        self._reset()
        self._mode = FormMode.CREATE

    def open_for_edit(self, user: User) -> None:
        if not self.config.features.editable_users:
            logger.warning(f"Edit of {user.id} ignored: editing users is disabled")
            return
        self._reset()
        self._mode = FormMode.EDIT
        self._editing = user
        self._draft = UserDraft.from_user(user)
        self._cities = self.reference_data.cities_of(user.address.state)

    def cancel(self) -> None:
        """Close without touching the store."""
        if self.is_open:
            logger.debug("Form cancelled; draft discarded")
        self._reset()

    def set_field(self, field: str, value: str) -> None:
        """Dispatch an input event to the setter for `field`."""
        setter = self._setters.get(field)
        if setter is None:
            raise KeyError(f"Unknown form field '{field}'")
        setter(value)

    def set_name(self, value: str) -> None:
        if self._accepts_input("name"):
            self._draft.name = value
            self._clear_error("name")

    def set_email(self, value: str) -> None:
        if self._accepts_input("email"):
            self._draft.email = value
            self._clear_error("email")

    def set_linkedin_url(self, value: str) -> None:
        if self._accepts_input("linkedinUrl"):
            self._draft.linkedin_url = value
            self._clear_error("linkedinUrl")

    def set_gender(self, value: str) -> None:
        if self._accepts_input("gender"):
            self._draft.gender = value
            self._clear_error("gender")

    def set_line1(self, value: str) -> None:
        if self._accepts_input("line1"):
            self._draft.address.line1 = value
            self._clear_error("line1")

    def set_line2(self, value: str) -> None:
        if self._accepts_input("line2"):
            self._draft.address.line2 = value
            self._clear_error("line2")

    def set_state(self, value: str) -> None:
        """Select a state: the city is reset and its options refreshed."""
        if not self._accepts_input("state"):
            return
        self._draft.address.state = value
        self._draft.address.city = ""
        self._cities = self.reference_data.cities_of(value)
        self._clear_error("state")

    def set_city(self, value: str) -> None:
        if self._accepts_input("city"):
            self._draft.address.city = value
            self._clear_error("city")

    def set_pin(self, value: str) -> None:
        """Keep digits only, capped at the configured pin length."""
        if not self._accepts_input("pin"):
            return
        self._draft.address.pin = self.sanitize_pin(value)
        self._clear_error("pin")

    def sanitize_pin(self, value: str) -> str:
        return _NON_DIGITS.sub("", value or "")[: self.config.validation.pin_max_length]

    def submit(self) -> Optional[User]:
        """Validate and commit the draft.

        Returns the committed user, or None when the form stays open with
        errors (or was not open at all).
        """
        if not self.is_open:
            logger.warning("Submit ignored: form is closed")
            return None

        editing_id = self._editing.id if self._editing is not None else None
        errors = self.validator.validate(self._draft, self.store.list_users(), editing_id)
        if errors:
            self._errors = errors
            return None

        if self._mode is FormMode.EDIT and editing_id is not None:
            user = self._draft.to_user(editing_id)
            self.store.update(user)
        else:
            user = self.store.create(self._draft.copy())
        self._reset()
        return user

    def _accepts_input(self, field: str) -> bool:
        if not self.is_open:
            logger.debug(f"Input for '{field}' ignored: form is closed")
            return False
        return True

    def _clear_error(self, field: str) -> None:
        self._errors.pop(field, None)

    def _reset(self) -> None:
        self._mode = FormMode.CLOSED
        self._editing = None
        self._draft = UserDraft()
        self._errors = {}
        self._cities = []


__all__ = ["FormMode", "FormSession"]
