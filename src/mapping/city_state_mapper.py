"""
City -> State Resolver
- Loads a {state: [cities]} reference table (file or URL) and inverts it
- Falls back to the built-in table when the reference is missing or malformed
- Resolves free-text city names through rewrites, direct lookup and aliases
"""
import json
import re
from typing import Dict, Optional, Tuple

import requests

from src.mapping.config import (
    CITY_STATE_MAP_PATH,
    CITY_STATE_MAP_TIMEOUT,
    CITY_NAME_REWRITES,
    CITY_ALIASES,
)
from src.mapping.default_city_state_map import create_default_city_state_map
from src.utils.log_utils import log_progress


def normalize_city_name(city: str) -> str:
    """Trim, lowercase, collapse whitespace and apply known spelling rewrites."""
    normalized = re.sub(r"\s+", " ", city.strip().lower())
    return CITY_NAME_REWRITES.get(normalized, normalized)


def get_city_alias(city: str) -> Optional[str]:
    """Alternative name for a city, or None."""
    return CITY_ALIASES.get(city)


def invert_state_cities(raw_map: dict) -> Dict[str, str]:
    """
    Turn {state: [city, ...]} into {city: state}.

    Raises:
        ValueError: when the structure is not an object of string lists
    """
    if not isinstance(raw_map, dict):
        raise ValueError(f"expected a JSON object, got {type(raw_map).__name__}")

    city_to_state = {}
    for state, cities in raw_map.items():
        if not isinstance(cities, list):
            raise ValueError(f"cities for state '{state}' must be a list")
        for city in cities:
            if not isinstance(city, str):
                raise ValueError(f"non-string city {city!r} under state '{state}'")
            normalized_city = city.strip().lower()
            if normalized_city:
                city_to_state[normalized_city] = state.strip().lower()
    return city_to_state


class CityStateMapper:
    """
    Maps city names to their (lowercase) state.
    The table is built by load() and only replaced by reload().
    """

    def __init__(self, source: str = CITY_STATE_MAP_PATH, timeout: float = CITY_STATE_MAP_TIMEOUT):
        self.source = source
        self.timeout = timeout
        self.city_to_state: Dict[str, str] = {}
        self.source_name = None

    def load(self) -> "CityStateMapper":
        """Build the city -> state table from the reference source or the defaults."""
        try:
            raw_map = self._read_source()
            self.city_to_state = invert_state_cities(raw_map)
            self.source_name = "url" if self._is_url() else "file"
        except (OSError, ValueError, requests.RequestException) as e:
            # json.JSONDecodeError is a ValueError
            log_progress(f"Could not load city-state map from {self.source}, using default mapping: {e}", "WARNING")
            self.city_to_state = create_default_city_state_map()
            self.source_name = "default"

        log_progress(f"Loaded city-to-state mapping for {len(self.city_to_state)} cities ({self.source_name})", "SUCCESS")
        return self

    def reload(self) -> "CityStateMapper":
        return self.load()

    def _is_url(self) -> bool:
        return bool(self.source) and self.source.lower().startswith(("http://", "https://"))

    def _read_source(self) -> dict:
        if not self.source:
            raise FileNotFoundError("no city-state map source configured")

        if self._is_url():
            response = requests.get(self.source, timeout=self.timeout)
            response.raise_for_status()
            return response.json()

        with open(self.source, "r", encoding="utf-8") as f:
            return json.load(f)

    def get_state_for_city(self, city: str) -> Tuple[Optional[str], bool]:
        """
        Resolve a city to its state.

        Returns:
            (state, True) when found, (None, False) otherwise. Never guesses.
        """
        if not city or not city.strip():
            return (None, False)

        normalized_city = normalize_city_name(city)

        state = self.city_to_state.get(normalized_city)
        if state:
            return (state, True)

        alias = get_city_alias(normalized_city)
        if alias:
            state = self.city_to_state.get(alias)
            if state:
                return (state, True)

        return (None, False)

    resolve = get_state_for_city

    def city_count(self) -> int:
        return len(self.city_to_state)
