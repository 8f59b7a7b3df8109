"""
MongoDB Connection Utility

MongoDB stores every entity of the school domain:
- users: accounts that can log in (admin / user)
- courses: catalogue of courses
- students, teachers: people, each holding a set of course ids

Relationships are stored as ObjectId references and joined on read.
"""
from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.collection import Collection
import structlog

from app.core.config import get_settings

settings = get_settings()
logger = structlog.get_logger()

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(settings.mongodb_uri)
    return _client


def get_mongo_db() -> Database:
    """
    Get the school database.

    Also used as a FastAPI dependency, so tests can swap the store
    through app.dependency_overrides.
    """
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[settings.mongodb_db]
    return _db


def get_collection(name: str, db: Database = None) -> Collection:
    """Get a specific collection from `db` (defaults to the shared database)."""
    if db is None:
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
        logger.warning("mongodb_connection_failed", error=str(e))
        return False


# Collection name constants (avoid typos)
COLLECTIONS = {
    "users": "users",
    "courses": "courses",
    "students": "students",
    "teachers": "teachers"
}


def init_mongo_indexes(db: Database = None):
    """
    Create the unique indexes that back the uniqueness rules.
    Call this once during app startup.
    """
    if db is None:
        db = get_mongo_db()

    db[COLLECTIONS["users"]].create_index([("email", ASCENDING)], unique=True)
    db[COLLECTIONS["users"]].create_index([("username", ASCENDING)], unique=True)
    db[COLLECTIONS["courses"]].create_index([("code", ASCENDING)], unique=True)
    db[COLLECTIONS["students"]].create_index([("email", ASCENDING)], unique=True)
    db[COLLECTIONS["teachers"]].create_index([("email", ASCENDING)], unique=True)

    # Reverse lookups for "who is enrolled in course X"
    db[COLLECTIONS["students"]].create_index("courses")
    db[COLLECTIONS["teachers"]].create_index("courses")

    logger.info("mongodb_indexes_created")
