# 📄 File: app/modules/rental_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups the rule checkers and the coordinator that together decide whether a rental may be created.
# 🧪 Purpose (Technical Summary):
# Package initialization exporting the eligibility validator, pending-rental guard and rental service.
# 🔗 Dependencies:
# eligibility_service.py, pending_rental_guard.py, rental_service.py
# 🔄 Connected Modules / Calls From:
# Application handlers, presentation dependencies, tests

from .eligibility_service import EligibilityValidator
from .pending_rental_guard import PendingRentalGuard
from .rental_service import RentalService

__all__ = [
    "EligibilityValidator",
    "PendingRentalGuard",
    "RentalService",
]
