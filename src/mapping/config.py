"""
City-State Mapping Configuration
Reference table location and lookup settings
"""
import os

# =============================================================================
# REFERENCE TABLE
# =============================================================================

# JSON object keyed by state name: {"maharashtra": ["mumbai", "pune", ...]}
# Either a local path or an http(s) URL
CITY_STATE_MAP_PATH = os.getenv("CITY_STATE_MAP_PATH", "data/city_state_map.json")

# Timeout (seconds) when the reference table is fetched over HTTP
CITY_STATE_MAP_TIMEOUT = float(os.getenv("CITY_STATE_MAP_TIMEOUT", "10"))

# =============================================================================
# NAME NORMALIZATION
# =============================================================================

# Spelling / historical-name rewrites applied before the table lookup
CITY_NAME_REWRITES = {
    "bombay": "mumbai",
    "new delhi": "delhi",
    "calcutta": "kolkata",
    "bangalore": "bengaluru",
}

# Secondary aliases, tried when the direct lookup misses
CITY_ALIASES = {
    "mumbai": "mumbai",
    "bombay": "mumbai",
    "delhi": "delhi",
    "new delhi": "delhi",
    "kolkata": "kolkata",
    "calcutta": "kolkata",
    "bengaluru": "bengaluru",
    "bangalore": "bengaluru",
    "banglore": "bengaluru",
    "madras": "chennai",
    "chennai": "chennai",
    "hyderabad": "hyderabad",
    "secunderabad": "hyderabad",
    "pondy": "puducherry",
    "ponducherry": "puducherry",
    "pondicherry": "puducherry",
    "puducherry": "puducherry",
    "cochin": "kochi",
    "ernakulam": "kochi",
    "trivandrum": "thiruvananthapuram",
    "calicut": "kozhikode",
    "trichy": "tiruchirappalli",
    "tuticorin": "thoothukudi",
    "mysuru": "mysore",
    "mangaluru": "mangalore",
    "hubballi": "hubli",
    "belagavi": "belgaum",
    "kalaburagi": "gulbarga",
    "shivamogga": "shimoga",
    "gurugram": "gurgaon",
    "prayagraj": "allahabad",
    "benares": "varanasi",
    "banaras": "varanasi",
    "poona": "pune",
    "baroda": "vadodara",
    "vizag": "visakhapatnam",
    "panjim": "panaji",
    "goa": "panaji",
    "dabolim": "panaji",
    "bagdogra": "siliguri",
    "gauhati": "guwahati",
    "simla": "shimla",
    "dharamsala": "dharamshala",
    "sri vijaya puram": "port blair",
}
