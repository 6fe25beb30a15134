# 📄 File: app/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a Python package containing common tools
# that every part of our Movie Rental app can use, like settings, errors and logging.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package initialization for configuration, infrastructure,
# and cross-cutting concerns used throughout the Movie Rental application modules.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities
# - Configuration and infrastructure components

"""
Shared Kernel - Common Utilities and Infrastructure

This package contains shared utilities, infrastructure components,
and cross-cutting concerns used throughout the Movie Rental application:

- Configuration management
- Database session infrastructure
- Exception hierarchy
- Logging utilities
"""

__all__ = []
