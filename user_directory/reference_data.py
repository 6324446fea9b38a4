from __future__ import annotations

"""Static state -> cities lookup used by the address form."""

from typing import Dict, List, Mapping, Optional, Sequence


STATES_AND_CITIES: Dict[str, List[str]] = {
    "Karnataka": ["Bangalore", "Mysore", "Mangalore", "Hubli", "Belgaum"],
    "Maharashtra": ["Mumbai", "Pune", "Nagpur", "Nashik", "Aurangabad"],
    "Tamil Nadu": ["Chennai", "Coimbatore", "Madurai", "Tiruchirappalli", "Salem"],
    "West Bengal": ["Kolkata", "Howrah", "Durgapur", "Asansol", "Siliguri"],
    "Gujarat": ["Ahmedabad", "Surat", "Vadodara", "Rajkot", "Bhavnagar"],
    "Telangana": ["Hyderabad", "Warangal", "Nizamabad", "Khammam", "Karimnagar"],
    "Rajasthan": ["Jaipur", "Jodhpur", "Udaipur", "Kota", "Ajmer"],
    "Kerala": ["Thiruvananthapuram", "Kochi", "Kozhikode", "Thrissur", "Kollam"],
    "Delhi": ["New Delhi", "North Delhi", "South Delhi", "East Delhi", "West Delhi"],
    "Uttar Pradesh": ["Lucknow", "Kanpur", "Agra", "Varanasi", "Meerut"],
}


class ReferenceData:
    """Read-only view over a state -> cities table.

    Lookups never raise: an unknown or empty state simply has no cities.
    """

    def __init__(self, table: Optional[Mapping[str, Sequence[str]]] = None) -> None:
        source = STATES_AND_CITIES if table is None else table
        self._table: Dict[str, List[str]] = {str(s): [str(c) for c in cities] for s, cities in source.items()}

    def list_states(self) -> List[str]:
        return list(self._table)

    def cities_of(self, state: str) -> List[str]:
        return list(self._table.get(state or "", []))

    def has_city(self, state: str, city: str) -> bool:
        return city in self._table.get(state or "", [])


DEFAULT_REFERENCE_DATA = ReferenceData()


def get_states() -> List[str]:
    return DEFAULT_REFERENCE_DATA.list_states()


def get_cities_by_state(state: str) -> List[str]:
    return DEFAULT_REFERENCE_DATA.cities_of(state)


__all__ = [
    "DEFAULT_REFERENCE_DATA",
    "ReferenceData",
    "STATES_AND_CITIES",
    "get_cities_by_state",
    "get_states",
]
