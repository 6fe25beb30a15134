# 📄 File: app/modules/rental_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# Holds the heart of the rental rules: what users, movies and rentals are and who may rent what.
# 🧪 Purpose (Technical Summary):
# Domain layer package for rental management (models, repository interfaces, services).
# 🔗 Dependencies:
# pydantic, abc
# 🔄 Connected Modules / Calls From:
# Application handlers, infrastructure repositories, presentation dependencies
