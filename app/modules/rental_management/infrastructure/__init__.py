# 📄 File: app/modules/rental_management/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Holds the code that actually stores and reads renters, movies and rentals.
# 🧪 Purpose (Technical Summary):
# Infrastructure layer package with SQLAlchemy and in-memory repository implementations.
# 🔗 Dependencies:
# database, memory subpackages
# 🔄 Connected Modules / Calls From:
# app.modules.rental_management.presentation.dependencies, app.main
