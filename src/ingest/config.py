"""
Flight Dataset Configuration
Dataset location and CSV column synonyms
"""
import os

# =============================================================================
# DATA PATHS
# =============================================================================

FLIGHT_DATASET_PATH = os.getenv("FLIGHT_DATASET_PATH", "data/dataset.csv")

# =============================================================================
# CSV COLUMNS
# =============================================================================

# Record field -> header names tried in order (lowercase, trimmed)
COLUMN_SYNONYMS = {
    "airline": ["airline"],
    "flight_date": ["date_of_journey", "flight_date", "flight date"],
    "source": ["source", "from_city", "from"],
    "destination": ["destination", "to_city", "to"],
    "flight_class": ["class", "flight_class"],
    "duration": ["duration"],
    "price": ["price"],
    "departure_time": ["departure_time", "dep_time"],
    "arrival_time": ["arrival_time", "arr_time"],
    "stops": ["stops"],
    "additional_info": ["additional_info", "info"],
}

# =============================================================================
# LOGGING
# =============================================================================

# Skipped rows beyond this count are only summarized
MAX_LOGGED_ROW_WARNINGS = int(os.getenv("MAX_LOGGED_ROW_WARNINGS", "5"))
