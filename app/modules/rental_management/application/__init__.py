# 📄 File: app/modules/rental_management/application/__init__.py
# 🧭 Purpose (Layman Explanation):
# Holds the "use cases" of the rental desk: renting movies and looking rentals up.
# 🧪 Purpose (Technical Summary):
# Application layer package with CQRS commands, queries and their handlers.
# 🔗 Dependencies:
# commands, queries, handlers subpackages
# 🔄 Connected Modules / Calls From:
# app.modules.rental_management.presentation
