# 📄 File: app/modules/rental_management/application/commands/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the "action commands" of the rental desk - for now, creating a rental.
# 🧪 Purpose (Technical Summary):
# Commands package initialization implementing the CQRS command side for rental management.
# 🔗 Dependencies:
# pydantic command models
# 🔄 Connected Modules / Calls From:
# command_handlers.py, rentals API endpoints

from .create_rental import CreateRentalCommand

__all__ = ["CreateRentalCommand"]
