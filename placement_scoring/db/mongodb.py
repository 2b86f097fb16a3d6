"""
MongoDB Connection Utility

MongoDB holds the portal's documents:
- studentprofiles: student profiles (placementReadinessScore lives here)
- jobs: job postings with their eligibility block
- applications: one per (student, job), carrying the computed match scores

The scoring engine never reads from here. Only the explicit persistence
step (services/mongo_service.py) writes computed scores back.
"""
from pymongo import MongoClient, DESCENDING
from pymongo.database import Database
from pymongo.collection import Collection
from placement_scoring.core.config import get_settings
from placement_scoring.core.logging import get_logger

logger = get_logger(__name__)

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(get_settings().mongodb_uri)
    return _client


def get_mongo_db() -> Database:
    """Get the portal database"""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[get_settings().mongodb_db]
    return _db


def get_collection(name: str) -> Collection:
    """Get a specific collection (see COLLECTIONS)."""
    db = get_mongo_db()
    return db[name]


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        # ping command checks connection
        client.admin.command('ping')
        return True
    except Exception as e:
        logger.warning("MongoDB connection failed: %s", e)
        return False


# Collection name constants (avoid typos)
COLLECTIONS = {
    "student_profiles": "studentprofiles",
    "jobs": "jobs",
    "applications": "applications"
}


def init_mongo_indexes():
    """
    Create indexes used by score-ordered queries.
    Call this once during app startup.
    """
    db = get_mongo_db()

    profiles = db[COLLECTIONS["student_profiles"]]
    profiles.create_index("userId", unique=True)
    profiles.create_index([("placementReadinessScore", DESCENDING)])
    profiles.create_index([("personalInfo.branch", 1), ("personalInfo.batch", 1)])

    db[COLLECTIONS["applications"]].create_index([
        ("jobId", 1),
        ("overallScore", DESCENDING)
    ])

    logger.info("MongoDB indexes created successfully")
