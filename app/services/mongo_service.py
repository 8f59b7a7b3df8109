"""
MongoDB Service - CRUD operations shared by every document collection.

Each entity service subclasses DocumentService and declares:
- collection_name: MongoDB collection it owns
- entity: name used in messages ("Student not found")
- unique_fields: fields that must be unique across the collection
- conflict_messages: 409 message per unique field, used on update

Uniqueness is enforced twice: a lookup before the write (clear message) and
the unique index created by init_mongo_indexes (catches races).
"""

from datetime import datetime, timezone
from typing import Optional, List, Dict
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError
import structlog

from app.core.errors import ConflictError, CreationError, NotFoundError
from app.db.mongodb import get_collection, get_mongo_db

logger = structlog.get_logger()


# ============================================================
# HELPER: Convert ObjectId to string for JSON serialization
# ============================================================

def serialize_doc(doc: dict) -> Optional[dict]:
    """Convert MongoDB document to JSON-serializable dict."""
    if doc is None:
        return None
    if "_id" in doc:
        doc["_id"] = str(doc["_id"])
    return doc


def to_object_id(value: str) -> ObjectId:
    """
    Parse a path/body identifier.

    Raises bson.errors.InvalidId for a malformed id; the app maps that to 500.
    """
    return ObjectId(value)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ============================================================
# BASE SERVICE
# ============================================================

class DocumentService:
    """
    Create / read / partial update / delete for one collection.
    """

    collection_name: str = None
    entity: str = None
    unique_fields: tuple = ()
    conflict_messages: Dict[str, str] = {}

    def __init__(self, db: Database = None):
        self.db: Database = db if db is not None else get_mongo_db()
        self.collection: Collection = get_collection(self.collection_name, self.db)

    # ---------- hooks ----------

    def new_document(self, data: dict) -> dict:
        """Build the document to insert from validated input."""
        now = utcnow()
        return {**data, "created_at": now, "updated_at": now}

    def present(self, doc: dict) -> dict:
        """Shape a stored document for the API."""
        return serialize_doc(doc)

    def not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.entity} not found")

    # ---------- operations ----------

    def create(self, data: dict) -> dict:
        """
        Insert a new document.

        Raises CreationError (400) if a unique field is already taken.
        """
        label = self.entity.lower()
        for field in self.unique_fields:
            if self.collection.find_one({field: data[field]}) is not None:
                raise CreationError(f"Error creating {label}: {field.capitalize()} already exists")

        doc = self.new_document(data)
        try:
            result = self.collection.insert_one(doc)
        except DuplicateKeyError as e:
            raise CreationError(f"Error creating {label}: duplicate key") from e

        logger.info(f"{label}_created", id=str(result.inserted_id))
        # Read back so timestamps have the same shape as on every later read
        return self.present(self.collection.find_one({"_id": result.inserted_id}))

    def get_all(self) -> List[dict]:
        return [self.present(doc) for doc in self.collection.find()]

    def get_by_id(self, entity_id: str) -> dict:
        doc = self.collection.find_one({"_id": to_object_id(entity_id)})
        if doc is None:
            raise self.not_found()
        return self.present(doc)

    def update(self, entity_id: str, data: dict) -> dict:
        """
        Partial update: only keys present in `data` (and not None) change.

        Raises NotFoundError (404) for a missing document before any
        uniqueness check, then ConflictError (409) when a unique field would
        collide with a different document; keeping one's own value is not a
        conflict.
        """
        oid = to_object_id(entity_id)
        if self.collection.find_one({"_id": oid}, {"_id": 1}) is None:
            raise self.not_found()

        changes = {k: v for k, v in data.items() if v is not None}

        for field in self.unique_fields:
            if field in changes:
                clash = self.collection.find_one({field: changes[field], "_id": {"$ne": oid}})
                if clash is not None:
                    raise ConflictError(self.conflict_messages[field])

        if not changes:
            return self.get_by_id(entity_id)

        changes["updated_at"] = utcnow()
        try:
            doc = self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": changes},
                return_document=ReturnDocument.AFTER
            )
        except DuplicateKeyError as e:
            field = next(f for f in self.unique_fields if f in changes)
            raise ConflictError(self.conflict_messages[field]) from e

        if doc is None:
            raise self.not_found()
        return self.present(doc)

    def delete(self, entity_id: str) -> dict:
        """Hard delete. Does not touch documents that reference this one."""
        doc = self.collection.find_one_and_delete({"_id": to_object_id(entity_id)})
        if doc is None:
            raise self.not_found()
        logger.info(f"{self.entity.lower()}_deleted", id=str(doc["_id"]))
        return serialize_doc(doc)
