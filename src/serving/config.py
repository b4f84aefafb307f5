"""
Serving Layer Configuration
Query defaults and API server settings
"""
import os

# =============================================================================
# QUERY DEFAULTS
# =============================================================================

# Airlines returned by the top-airlines query when no valid limit is given
DEFAULT_AIRLINE_LIMIT = int(os.getenv("DEFAULT_AIRLINE_LIMIT", "10"))

# Unresolved city names kept in the coverage report
TOP_UNRESOLVED_CITIES = int(os.getenv("TOP_UNRESOLVED_CITIES", "10"))

# =============================================================================
# API SERVER
# =============================================================================

SERVER_HOST = os.getenv("SERVER_HOST", "0.0.0.0")
SERVER_PORT = int(os.getenv("SERVER_PORT", "8080"))

# Comma-separated list, "*" allows any origin
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
