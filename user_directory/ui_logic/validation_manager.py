"""
Framework-agnostic validation for user drafts.

This module checks a candidate user against the configured field rules and
the email uniqueness constraint. It holds no state of its own and never
raises for bad input: every problem becomes an entry in the returned
error map, keyed by form field name.

Per field, at most one message is reported, in precedence order:
required -> format -> cross-record checks.
"""

from typing import Callable, Dict, Iterable, List, Optional
import logging

from ..app_config import AppConfig
from ..models import Gender, User, UserDraft
from ..reference_data import DEFAULT_REFERENCE_DATA, ReferenceData

logger = logging.getLogger(__name__)

ErrorMap = Dict[str, str]

FIELDS: List[str] = ["name", "email", "linkedinUrl", "gender", "line1", "state", "city", "pin"]


def _field_value(draft: UserDraft, field: str) -> str:
    if field == "linkedinUrl":
        return draft.linkedin_url
    if field in ("line1", "line2", "state", "city", "pin"):
        return getattr(draft.address, field)
    return getattr(draft, field)


class ValidationManager:
    """
    Validates user drafts.

    The manager is built from the application config (lengths, patterns and
    messages) and the reference data used to check the state/city pair.
    """

    def __init__(self, config: AppConfig, reference_data: Optional[ReferenceData] = None):
        """Initialize the validation manager.

        Args:
            config: Application configuration with rules and messages
            reference_data: State/city lookup, defaults to the static table
        """
        self.config = config
        self.reference_data = reference_data or DEFAULT_REFERENCE_DATA
        self._checks: Dict[str, Callable[[UserDraft, List[User], Optional[str]], Optional[str]]] = {
            "name": self._check_name,
            "email": self._check_email,
            "linkedinUrl": self._check_linkedin_url,
            "gender": self._check_gender,
            "line1": self._check_line1,
            "state": self._check_state,
            "city": self._check_city,
            "pin": self._check_pin,
        }

    def validate(self, draft: UserDraft, existing_users: Iterable[User],
                 editing_id: Optional[str] = None) -> ErrorMap:
        """Validate every field of a draft.

        Args:
            draft: Candidate values from the form
            existing_users: Users already in the store, for the duplicate check
            editing_id: Id of the user being edited, excluded from the duplicate check

        Returns:
            Mapping of field name to message; empty when the draft is valid
        """
        users = list(existing_users)
        errors: ErrorMap = {}
        for field in FIELDS:
            message = self._checks[field](draft, users, editing_id)
            if message:
                errors[field] = message
        if errors:
            logger.debug(f"Draft rejected with errors on: {', '.join(errors)}")
        return errors

    def validate_field(self, field: str, draft: UserDraft, existing_users: Iterable[User],
                       editing_id: Optional[str] = None) -> Optional[str]:
        """Return the message for a single field, or None if it is valid."""
        check = self._checks.get(field)
        if check is None:
            return None
        return check(draft, list(existing_users), editing_id)

    def _msg(self, key: str) -> str:
        return self.config.label(f"errors.{key}", key)

    def _required(self, draft: UserDraft, field: str) -> Optional[str]:
        if not _field_value(draft, field).strip():
            return self._msg("required")
        return None

    def _check_name(self, draft: UserDraft, users: List[User], editing_id: Optional[str]) -> Optional[str]:
        missing = self._required(draft, "name")
        if missing:
            return missing
        rules = self.config.validation.name
        length = len(draft.name.strip())
        if length < rules.min_length:
            return f"{self._msg('minChars')} {rules.min_length} {self._msg('chars')}"
        if length > rules.max_length:
            return f"{self._msg('maxChars')} {rules.max_length} {self._msg('chars')}"
        return None

    def _check_email(self, draft: UserDraft, users: List[User], editing_id: Optional[str]) -> Optional[str]:
        missing = self._required(draft, "email")
        if missing:
            return missing
        if not self.config.validation.email_pattern.fullmatch(draft.email):
            return self._msg("invalidEmail")
        if self.is_duplicate_email(draft.email, users, editing_id):
            return self._msg("duplicateEmail")
        return None

    def _check_linkedin_url(self, draft: UserDraft, users: List[User], editing_id: Optional[str]) -> Optional[str]:
        missing = self._required(draft, "linkedinUrl")
        if missing:
            return missing
        if not self.config.validation.linkedin_url_pattern.fullmatch(draft.linkedin_url):
            return self._msg("invalidUrl")
        return None

    def _check_gender(self, draft: UserDraft, users: List[User], editing_id: Optional[str]) -> Optional[str]:
        missing = self._required(draft, "gender")
        if missing:
            return missing
        if draft.gender not in Gender.values():
            return self._msg("invalidOption")
        return None

    def _check_line1(self, draft: UserDraft, users: List[User], editing_id: Optional[str]) -> Optional[str]:
        return self._required(draft, "line1")

    def _check_state(self, draft: UserDraft, users: List[User], editing_id: Optional[str]) -> Optional[str]:
        return self._required(draft, "state")

    def _check_city(self, draft: UserDraft, users: List[User], editing_id: Optional[str]) -> Optional[str]:
        missing = self._required(draft, "city")
        if missing:
            return missing
        state = draft.address.state
        # Without a state the state field carries the error
        if state.strip() and not self.reference_data.has_city(state, draft.address.city):
            return self._msg("invalidCity")
        return None

    def _check_pin(self, draft: UserDraft, users: List[User], editing_id: Optional[str]) -> Optional[str]:
        missing = self._required(draft, "pin")
        if missing:
            return missing
        if not self.config.validation.pin_pattern.fullmatch(draft.address.pin):
            return self._msg("digits")
        return None

    @staticmethod
    def is_duplicate_email(email: str, users: Iterable[User], editing_id: Optional[str] = None) -> bool:
        """Case-insensitive email collision, ignoring the record being edited."""
        needle = email.lower()
        return any(
            u.email.lower() == needle and (editing_id is None or u.id != editing_id)
            for u in users
        )


__all__ = ["ErrorMap", "FIELDS", "ValidationManager"]
