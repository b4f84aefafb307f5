"""
Canonical Indian states and union territories.
The list is the universe of valid states regardless of what the data holds.
"""
import re
from typing import List, Optional

INDIAN_STATES = [
    "Andhra Pradesh", "Arunachal Pradesh", "Assam", "Bihar", "Chhattisgarh",
    "Goa", "Gujarat", "Haryana", "Himachal Pradesh", "Jharkhand",
    "Karnataka", "Kerala", "Madhya Pradesh", "Maharashtra", "Manipur",
    "Meghalaya", "Mizoram", "Nagaland", "Odisha", "Punjab",
    "Rajasthan", "Sikkim", "Tamil Nadu", "Telangana", "Tripura",
    "Uttar Pradesh", "Uttarakhand", "West Bengal",
    # Union territories
    "Delhi", "Puducherry", "Andaman and Nicobar Islands",
    "Dadra and Nagar Haveli and Daman and Diu", "Lakshadweep", "Ladakh",
]

# Words kept lowercase inside display names
LOWERCASE_WORDS = {"and", "or"}


def state_key(name: str) -> str:
    """Canonical lookup key: lowercase, hyphens and runs of whitespace folded to one space."""
    if not name:
        return ""
    return re.sub(r"\s+", " ", name.replace("-", " ")).strip().lower()


# key -> display name, e.g. "tamil nadu" -> "Tamil Nadu"
STATE_DISPLAY_NAMES = {state_key(name): name for name in INDIAN_STATES}


def get_all_indian_states() -> List[str]:
    """Fixed list of display names, in their canonical order."""
    return list(INDIAN_STATES)


def capitalize_state_words(name: str) -> str:
    """Capitalize each word of a state name, keeping 'and'/'or' lowercase."""
    words = []
    for word in state_key(name).split(" "):
        if word in LOWERCASE_WORDS:
            words.append(word)
        elif word:
            words.append(word[0].upper() + word[1:])
    return " ".join(words)


def display_name_for_state(name: str) -> Optional[str]:
    """
    Display form of a state name.

    Known states come from the fixed table; anything else (possible with an
    external reference file) falls back to word capitalization.
    """
    key = state_key(name)
    if not key:
        return None
    return STATE_DISPLAY_NAMES.get(key) or capitalize_state_words(key)


def state_name_from_slug(slug: str) -> str:
    """'andaman-and-nicobar-islands' -> 'Andaman and Nicobar Islands'"""
    return capitalize_state_words(slug)
