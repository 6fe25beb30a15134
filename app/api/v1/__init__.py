# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# This file organizes version 1 of our API so new versions can be added later
# without breaking existing clients.
# 🧪 Purpose (Technical Summary):
# Package initialization for API version 1, providing version metadata, route prefixes
# and OpenAPI tags.
# 🔗 Dependencies:
# typing
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main

"""
Movie Rental API Version 1

Structure:
    v1/
    ├── __init__.py          # This file
    ├── router.py            # Main v1 router aggregation
    └── health.py            # Health check endpoints
"""

from typing import Any, Dict

# API v1 metadata
__version__ = "1.0.0"
__api_version__ = "v1"
__status__ = "stable"

# API v1 configuration
API_V1_CONFIG = {
    "version": __version__,
    "api_version": __api_version__,
    "status": __status__,
    "description": "Movie Rental API Version 1",
    "features": [
        "rental_management",
    ],
}

# API v1 route prefixes
ROUTE_PREFIXES = {
    "rentals": "/rentals",
}

# API v1 tags for OpenAPI documentation
API_TAGS = [
    {
        "name": "Rentals",
        "description": "Rental creation and lookup"
    },
    {
        "name": "Health Check",
        "description": "Liveness and readiness probes"
    },
]


def get_api_info() -> Dict[str, Any]:
    """Get API v1 information."""
    return {
        **API_V1_CONFIG,
        "route_prefixes": ROUTE_PREFIXES,
    }
