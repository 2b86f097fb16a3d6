"""
API module - FastAPI routers over the scoring engine.

Usage:
    from placement_scoring.api.routes import api_router
    app.include_router(api_router)
"""
