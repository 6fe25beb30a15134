# 📄 File: app/modules/rental_management/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the processors that carry out rental commands and answer rental queries.
# 🧪 Purpose (Technical Summary):
# Handlers package initialization exporting CQRS command and query handlers.
# 🔗 Dependencies:
# command_handlers.py, query_handlers.py
# 🔄 Connected Modules / Calls From:
# presentation dependencies, rentals API endpoints

from .command_handlers import CreateRentalCommandHandler
from .query_handlers import GetRentalQueryHandler, ListRentalsQueryHandler

__all__ = [
    "CreateRentalCommandHandler",
    "GetRentalQueryHandler",
    "ListRentalsQueryHandler",
]
