# 📄 File: app/modules/rental_management/presentation/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the rental web endpoints and the shapes of their requests and responses.
# 🧪 Purpose (Technical Summary):
# API package initialization for rental management endpoints and schemas.
# 🔗 Dependencies:
# v1 routers, schemas
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

"""
Rental Management API

API Structure:
- Version 1 (/api/v1)
  - Rentals (/rentals): create, list and fetch rentals
"""
