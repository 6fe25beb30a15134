# 📄 File: app/modules/rental_management/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups version 1 of the rental web endpoints.
# 🧪 Purpose (Technical Summary):
# Package initialization exporting the v1 rentals router.
# 🔗 Dependencies:
# rentals.py
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

from .rentals import rentals_router

__all__ = ["rentals_router"]
