"""
Placement Scoring Engine - Main Application

FastAPI service exposing:
- Eligibility gate and eligibility score
- Placement Readiness Score (PRS)
- Student-job match score and rankings

Run: uvicorn placement_scoring.main:app --reload
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from placement_scoring import __version__
from placement_scoring.api.routes import api_router
from placement_scoring.core.logging import get_logger
from placement_scoring.db.mongodb import init_mongo_indexes, test_mongo_connection

logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Placement Scoring Engine",
    description="""
    Eligibility & scoring core of the campus-placement portal.

    ## Features
    - **Eligibility**: hard gate (CGPA, branch, backlogs, batch) plus a 0-100 score
    - **Readiness**: Placement Readiness Score from academics, skills, experience, completeness
    - **Matching**: 40% eligibility + 35% skill match + 25% PRS
    - **Ranking**: eligible jobs for a student, eligible students or applicants for a job

    All scoring endpoints are pure; only the `/{id}` variants store results.
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (allow all for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")


# Startup event
@app.on_event("startup")
async def startup_event():
    """Initialize MongoDB indexes on startup."""
    try:
        init_mongo_indexes()
    except Exception as e:
        logger.warning("MongoDB index initialization failed: %s", e)


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "version": __version__,
        "mongodb": "connected" if test_mongo_connection() else "disconnected"
    }
