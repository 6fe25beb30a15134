# 📄 File: app/modules/rental_management/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# Holds the web-facing part of the rental desk.
# 🧪 Purpose (Technical Summary):
# Presentation layer package: FastAPI routers, schemas and request-scoped dependencies.
# 🔗 Dependencies:
# FastAPI, api subpackage, dependencies.py
# 🔄 Connected Modules / Calls From:
# app.api.v1.router
