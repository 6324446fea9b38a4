from __future__ import annotations

"""
Application configuration loader.

Responsibilities
- Load `config/app_config.yaml` (or any YAML path) with `yaml.safe_load`.
- Merge the document over built-in defaults so a partial file is enough.
- Compile the validation patterns once and expose them through typed
  dataclasses consumed by the validation engine and the UI.

The YAML keys keep the camelCase names of the stored records
(`validation.name.minLength`, `features.editableUsers`, ...). Unknown keys
are ignored; malformed values raise `ConfigError` at load time.
"""

from dataclasses import dataclass, field
import copy
import logging
import re
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Pattern

import yaml

from .io_paths import DEFAULT_CONFIG_FILE

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when the configuration document cannot be used."""


DEFAULT_EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"
DEFAULT_LINKEDIN_PATTERN = r"^https?://(www\.)?linkedin\.com/.+$"
DEFAULT_PIN_PATTERN = r"^\d+$"

DEFAULT_TEXT: Dict[str, Any] = {
    "pageTitle": "User Management",
    "pageSubtitle": "Manage your users and their details",
    "addUserButton": "Add User",
    "addUserTitle": "Add New User",
    "editUserTitle": "Edit User",
    "loading": "Loading...",
    "noUsersFound": "No users found",
    "noUsersSubtext": "Click \"Add User\" to create your first user",
    "viewProfile": "View Profile",
    "editButton": "Edit",
    "deleteButton": "Delete",
    "cancelButton": "Cancel",
    "saveButton": "Save",
    "updateButton": "Update",
    "exportButton": "Export CSV",
    "pin": "PIN",
    "completeAddress": "Complete Address",
    "showingUsers": "Showing",
    "user": "user",
    "users": "users",
    "deleteConfirmTitle": "Delete User",
    "deleteConfirmMessage": "Are you sure you want to delete",
    "tableHeaders": {
        "name": "Name",
        "email": "Email",
        "linkedin": "LinkedIn",
        "gender": "Gender",
        "address": "Address",
        "actions": "Actions",
    },
    "formFields": {
        "name": "Name",
        "email": "Email",
        "linkedinUrl": "LinkedIn URL",
        "gender": "Gender",
        "line1": "Address Line 1",
        "line2": "Address Line 2",
        "state": "State",
        "city": "City",
        "pin": "PIN Code",
    },
    "placeholders": {
        "name": "Enter full name",
        "email": "Enter email address",
        "linkedinUrl": "https://linkedin.com/in/username",
        "gender": "Select gender",
        "line1": "House number, street",
        "line2": "Apartment, landmark (optional)",
        "state": "Select state",
        "city": "Select city",
        "pin": "6-digit PIN code",
    },
    "addressLabels": {
        "line1": "Address Line 1",
        "line2": "Address Line 2",
        "city": "City",
        "state": "State",
        "pin": "PIN Code",
        "notAvailable": "N/A",
    },
    "errors": {
        "required": "This field is required",
        "minChars": "Minimum",
        "maxChars": "Maximum",
        "chars": "characters",
        "invalidEmail": "Please enter a valid email address",
        "duplicateEmail": "This email is already registered",
        "invalidUrl": "Please enter a valid LinkedIn URL",
        "invalidOption": "Please select a valid option",
        "invalidCity": "Please select a city from the chosen state",
        "digits": "Only digits are allowed",
    },
}


@dataclass
class NameRules:
    """Inclusive bounds on the trimmed name length."""
    min_length: int = 2
    max_length: int = 50


@dataclass
class ValidationRules:
    """Compiled field rules.

    - email/linkedin/pin patterns are compiled with `re.ASCII` and must
      match the whole value, so digit classes mean 0-9 only
    - pin_max_length only governs input sanitisation, not validation
    """
    name: NameRules = field(default_factory=NameRules)
    email_pattern: Pattern[str] = field(default_factory=lambda: re.compile(DEFAULT_EMAIL_PATTERN, re.ASCII))
    linkedin_url_pattern: Pattern[str] = field(default_factory=lambda: re.compile(DEFAULT_LINKEDIN_PATTERN, re.ASCII))
    pin_pattern: Pattern[str] = field(default_factory=lambda: re.compile(DEFAULT_PIN_PATTERN, re.ASCII))
    pin_max_length: int = 6


@dataclass
class Features:
    """Toggles gating the row actions offered by the table."""
    editable_users: bool = True
    deletable_users: bool = True


@dataclass
class AppConfig:
    """Read-only application configuration."""
    validation: ValidationRules = field(default_factory=ValidationRules)
    features: Features = field(default_factory=Features)
    text: Dict[str, Any] = field(default_factory=lambda: copy.deepcopy(DEFAULT_TEXT))

    def label(self, dotted_key: str, default: str = "") -> str:
        """Look up a text entry such as ``"errors.required"``."""
        node: Any = self.text
        for part in dotted_key.split("."):
            if not isinstance(node, Mapping) or part not in node:
                return default
            node = node[part]
        return node if isinstance(node, str) else default


def _deep_merge(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(out.get(key), dict):
            out[key] = _deep_merge(out[key], value)
        else:
            out[str(key)] = value
    return out


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, Mapping):
        raise ConfigError(f"'{key}' must be a mapping, got {type(value).__name__}")
    return value


def _compile(expr: Any, where: str) -> Pattern[str]:
    try:
        return re.compile(str(expr), re.ASCII)
    except re.error as exc:
        raise ConfigError(f"Invalid regular expression for {where}: {exc}") from exc


def _positive_int(value: Any, where: str) -> int:
    try:
        out = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{where} must be an integer, got {value!r}") from exc
    if out < 0:
        raise ConfigError(f"{where} must be non-negative, got {out}")
    return out


def _flag(value: Any, where: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{where} must be true or false, got {value!r}")
    return value


def app_config_from_dict(data: Mapping[str, Any]) -> AppConfig:
    """Build an `AppConfig` from a parsed YAML/JSON document."""
    if not isinstance(data, Mapping):
        raise ConfigError("Configuration document must be a mapping")

    validation = _section(data, "validation")
    name = _section(validation, "name")
    email = _section(validation, "email")
    linkedin = _section(validation, "linkedinUrl")
    pin = _section(validation, "pin")

    name_rules = NameRules(
        min_length=_positive_int(name.get("minLength", NameRules.min_length), "validation.name.minLength"),
        max_length=_positive_int(name.get("maxLength", NameRules.max_length), "validation.name.maxLength"),
    )
    if name_rules.min_length > name_rules.max_length:
        raise ConfigError(
            f"validation.name.minLength ({name_rules.min_length}) exceeds maxLength ({name_rules.max_length})"
        )

    rules = ValidationRules(
        name=name_rules,
        email_pattern=_compile(email.get("pattern", DEFAULT_EMAIL_PATTERN), "validation.email.pattern"),
        linkedin_url_pattern=_compile(linkedin.get("pattern", DEFAULT_LINKEDIN_PATTERN), "validation.linkedinUrl.pattern"),
        pin_pattern=_compile(pin.get("pattern", DEFAULT_PIN_PATTERN), "validation.pin.pattern"),
        pin_max_length=_positive_int(pin.get("maxLength", 6), "validation.pin.maxLength"),
    )

    feats = _section(data, "features")
    features = Features(
        editable_users=_flag(feats.get("editableUsers", True), "features.editableUsers"),
        deletable_users=_flag(feats.get("deletableUsers", True), "features.deletableUsers"),
    )

    text = _deep_merge(copy.deepcopy(DEFAULT_TEXT), _section(data, "text"))
    return AppConfig(validation=rules, features=features, text=text)


def load_app_config(path: Optional[Path] = None) -> AppConfig:
    """Load configuration from YAML, falling back to defaults if the file is absent."""
    cfg_path = Path(path) if path is not None else DEFAULT_CONFIG_FILE
    if not cfg_path.exists():
        logger.info(f"No config file at {cfg_path}; using built-in defaults")
        return AppConfig()
    with cfg_path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Failed to parse {cfg_path}: {exc}") from exc
    config = app_config_from_dict(data)
    logger.debug(f"Loaded configuration from {cfg_path}")
    return config


__all__ = [
    "AppConfig",
    "ConfigError",
    "Features",
    "NameRules",
    "ValidationRules",
    "app_config_from_dict",
    "load_app_config",
]
