# 📄 File: app/modules/rental_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the movie rental system that decides whether a renter may take home the movies
# they picked and records the rental when every rule is satisfied.
# 🧪 Purpose (Technical Summary):
# Package initialization for the rental management module implementing domain-driven design
# with CQRS commands/queries for rental creation and lookup.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic, app.shared.core
# 🔄 Connected Modules / Calls From:
# app.main, app.api.v1.router, rental API endpoints

"""
Rental Management Module

This module handles the rental creation pipeline:
- Eligibility validation (age gate and availability gate per movie)
- Pending-rental guard (one open rental per renter)
- Rental creation orchestration and persistence
- Rental listing and lookup

Architecture follows Domain-Driven Design:
- Domain: Models, repository interfaces and business services
- Application: Commands, queries and their handlers
- Infrastructure: SQLAlchemy and in-memory repository implementations
- Presentation: API endpoints and request/response schemas
"""

from typing import Any, Dict

from .domain.models.rental import RENTAL_LIMITATIONS

# Module metadata
__version__ = "1.0.0"
__module_name__ = "rental_management"
__description__ = "Movie Rental Creation and Lookup Module"

RENTAL_MANAGEMENT_CONFIG = {
    "version": __version__,
    "module_name": __module_name__,
    "description": __description__,
    "limitations": RENTAL_LIMITATIONS.model_dump(),
    "backends": ["database", "memory"],
}


def get_module_config() -> Dict[str, Any]:
    """Get rental management module configuration."""
    return RENTAL_MANAGEMENT_CONFIG
