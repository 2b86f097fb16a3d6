"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from placement_scoring.api.routes.scoring_routes import router as scoring_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(scoring_router)
