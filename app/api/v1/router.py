# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# This file acts like a traffic director for all API version 1 requests, sending rental
# requests to the rental endpoints.
# 🧪 Purpose (Technical Summary):
# Main API v1 router aggregation that combines module routers and configures route prefixes.
# 🔗 Dependencies:
# FastAPI, app.modules.rental_management.presentation.api.v1
# 🔄 Connected Modules / Calls From:
# app.main

import logging

from fastapi import APIRouter

from app.modules.rental_management.presentation.api.v1.rentals import rentals_router

from . import ROUTE_PREFIXES, get_api_info

logger = logging.getLogger(__name__)

# Create main API v1 router
api_v1_router = APIRouter()


@api_v1_router.get("/",
                  summary="API v1 Information",
                  description="Get API v1 version information and available endpoints",
                  tags=["API Info"])
async def api_v1_info() -> dict:
    """API v1 information endpoint"""
    return {
        **get_api_info(),
        "documentation": {
            "openapi_schema": "/openapi.json",
            "swagger_ui": "/docs",
            "redoc": "/redoc"
        }
    }


# =========================================================================
# MODULE ROUTER INCLUDES - RENTAL MANAGEMENT MODULE
# =========================================================================

api_v1_router.include_router(
    rentals_router,
    prefix=ROUTE_PREFIXES["rentals"],
    tags=["Rentals"]
)
logger.debug("Rentals router loaded")
