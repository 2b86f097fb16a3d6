"""
MongoDB Service - persists scores computed by the engine.

The scorers are pure: they never load or save anything. After computing,
the caller hands the result to one of these services:

1. studentprofiles.placementReadinessScore  <- compute_readiness()
2. applications.{overallScore, ...}         <- calculate_match()
"""

from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from pymongo.collection import Collection

from placement_scoring.core.logging import get_logger
from placement_scoring.db.mongodb import get_collection, COLLECTIONS
from placement_scoring.schemas.schemas import MatchResult

logger = get_logger(__name__)


def as_object_id(value: Any) -> Any:
    """Convert 24-char hex ids to ObjectId; leave anything else as is."""
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return value


# ============================================================
# STUDENT PROFILES COLLECTION
# ============================================================

class StudentProfileService:
    """Stores the Placement Readiness Score on a student profile."""

    def __init__(self, collection: Optional[Collection] = None):
        self.collection: Collection = collection if collection is not None \
            else get_collection(COLLECTIONS["student_profiles"])

    def update_readiness_score(self, user_id: str, score: int) -> bool:
        """
        Write a freshly computed PRS onto the student's profile.

        Args:
            user_id: Owning user's id (profiles are keyed by userId)
            score: PRS from compute_readiness()

        Returns:
            True if a profile matched
        """
        result = self.collection.update_one(
            {"userId": as_object_id(user_id)},
            {"$set": {
                "placementReadinessScore": score,
                "updatedAt": datetime.now(timezone.utc)
            }}
        )
        logger.info("Stored PRS %d for user %s (matched=%d)", score, user_id, result.matched_count)
        return result.matched_count > 0


# ============================================================
# APPLICATIONS COLLECTION
# ============================================================

class ApplicationService:
    """Stores match scores on an application."""

    def __init__(self, collection: Optional[Collection] = None):
        self.collection: Collection = collection if collection is not None \
            else get_collection(COLLECTIONS["applications"])

    def update_match_scores(self, application_id: str, match: MatchResult) -> bool:
        """Copy a MatchResult onto the application document."""
        result = self.collection.update_one(
            {"_id": as_object_id(application_id)},
            {"$set": {
                "overallScore": match.overall_score,
                "eligibilityScore": match.breakdown.eligibility,
                "skillMatchScore": match.breakdown.skill_match,
                "prsScore": match.breakdown.prs,
                "updatedAt": datetime.now(timezone.utc)
            }}
        )
        return result.matched_count > 0


# ============================================================
# CONVENIENCE FUNCTIONS
# ============================================================

def get_student_profile_service() -> StudentProfileService:
    return StudentProfileService()


def get_application_service() -> ApplicationService:
    return ApplicationService()
