from __future__ import annotations

"""
Typed records for the user directory.

`User` and `Address` are committed records; every field is populated once
constructed. `UserDraft` and `AddressDraft` hold the in-progress form values,
where any field may still be an empty string.

Serialization uses the camelCase keys of the persisted JSON array
(`linkedinUrl`, `address.line1`, ...).
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Mapping


class Gender(Enum):
    """Enumeration of selectable genders."""
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"

    @classmethod
    def values(cls) -> list[str]:
        return [g.value for g in cls]


@dataclass
class Address:
    line1: str
    line2: str
    state: str
    city: str
    pin: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "line1": self.line1,
            "line2": self.line2,
            "state": self.state,
            "city": self.city,
            "pin": self.pin,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Address":
        """Build from a persisted mapping; raises ValueError on a bad shape."""
        if not isinstance(data, Mapping):
            raise ValueError("address must be an object")
        return cls(
            line1=_required_str(data, "line1"),
            line2=str(data.get("line2") or ""),
            state=_required_str(data, "state"),
            city=_required_str(data, "city"),
            pin=_required_str(data, "pin"),
        )


@dataclass
class User:
    id: str
    name: str
    email: str
    linkedin_url: str
    gender: str
    address: Address

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "linkedinUrl": self.linkedin_url,
            "gender": self.gender,
            "address": self.address.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        """Build from a persisted mapping; raises ValueError on a bad shape."""
        if not isinstance(data, Mapping):
            raise ValueError("user must be an object")
        return cls(
            id=_required_str(data, "id"),
            name=_required_str(data, "name"),
            email=_required_str(data, "email"),
            linkedin_url=_required_str(data, "linkedinUrl"),
            gender=_required_str(data, "gender"),
            address=Address.from_dict(data.get("address")),
        )


@dataclass
class AddressDraft:
    line1: str = ""
    line2: str = ""
    state: str = ""
    city: str = ""
    pin: str = ""


@dataclass
class UserDraft:
    """Form values for a user that has not been committed yet."""
    name: str = ""
    email: str = ""
    linkedin_url: str = ""
    gender: str = ""
    address: AddressDraft = field(default_factory=AddressDraft)

    @classmethod
    def from_user(cls, user: User) -> "UserDraft":
        """Copy a committed user into a fresh draft (address included)."""
        a = user.address
        return cls(
            name=user.name,
            email=user.email,
            linkedin_url=user.linkedin_url,
            gender=user.gender,
            address=AddressDraft(line1=a.line1, line2=a.line2, state=a.state, city=a.city, pin=a.pin),
        )

    def copy(self) -> "UserDraft":
        return replace(self, address=replace(self.address))

    def to_user(self, user_id: str) -> User:
        a = self.address
        return User(
            id=user_id,
            name=self.name,
            email=self.email,
            linkedin_url=self.linkedin_url,
            gender=self.gender,
            address=Address(line1=a.line1, line2=a.line2, state=a.state, city=a.city, pin=a.pin),
        )


def _required_str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


__all__ = ["Address", "AddressDraft", "Gender", "User", "UserDraft"]
