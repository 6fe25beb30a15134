# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The main entry point that tells Python this 'app' folder contains our Movie Rental application code
# and sets up the basic version and package information.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version info for the Movie Rental FastAPI application.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)

"""
Movie Rental Application

Backend API that validates and records movie rentals: renter age checks for
adults-only titles, movie availability, and one open rental per renter.
"""

__version__ = "1.0.0"
__title__ = "Movie Rental API"
__description__ = "Movie rental creation and lookup service"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
]
