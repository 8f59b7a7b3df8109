"""
Enrollment Service - entities that hold a set of course references.

Students and teachers store `courses` as a list of Course ObjectIds with set
semantics ($addToSet / $pull, atomic per document). On read the ids are
populated with the Course documents they point at; ids whose course no
longer exists are left in storage but omitted from the response.
"""

from typing import List
from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database
import structlog

from app.core.errors import NotFoundError
from app.db.mongodb import get_collection, COLLECTIONS
from app.services.mongo_service import DocumentService, serialize_doc, to_object_id, utcnow

logger = structlog.get_logger()


class EnrollableService(DocumentService):

    def __init__(self, db: Database = None):
        super().__init__(db)
        self.courses: Collection = get_collection(COLLECTIONS["courses"], self.db)

    def new_document(self, data: dict) -> dict:
        doc = super().new_document(data)
        doc["courses"] = []
        return doc

    def populate(self, docs: List[dict]) -> List[dict]:
        """Replace stored course ids with Course documents, one query for all docs."""
        course_ids = {cid for doc in docs for cid in doc.get("courses", [])}
        found = {}
        if course_ids:
            for course in self.courses.find({"_id": {"$in": list(course_ids)}}):
                key = course["_id"]
                found[key] = serialize_doc(course)

        result = []
        for doc in docs:
            stored = doc.get("courses", [])
            doc = serialize_doc(doc)
            doc["courses"] = [found[cid] for cid in stored if cid in found]
            result.append(doc)
        return result

    def present(self, doc: dict) -> dict:
        return self.populate([doc])[0]

    def get_all(self) -> List[dict]:
        return self.populate(list(self.collection.find()))

    def enroll_course(self, entity_id: str, course_id: str) -> dict:
        """
        Add course_id to the entity's course set.

        Enrolling twice is a no-op. Raises NotFoundError if the course or
        the entity does not exist (course is checked first).
        """
        oid = to_object_id(entity_id)
        course_oid = to_object_id(course_id)

        if self.courses.find_one({"_id": course_oid}) is None:
            raise NotFoundError("Cannot enroll: Course not found")

        doc = self.collection.find_one_and_update(
            {"_id": oid},
            {"$addToSet": {"courses": course_oid}, "$set": {"updated_at": utcnow()}},
            return_document=ReturnDocument.AFTER
        )
        if doc is None:
            raise self.not_found()

        logger.info("course_enrolled", entity=self.entity.lower(), id=entity_id, course_id=course_id)
        return self.present(doc)

    def remove_course(self, entity_id: str, course_id: str) -> dict:
        """
        Remove course_id from the entity's course set.

        Removing a course that is not in the set (or no longer exists)
        succeeds and leaves the set unchanged.
        """
        oid = to_object_id(entity_id)
        course_oid = to_object_id(course_id)

        doc = self.collection.find_one_and_update(
            {"_id": oid},
            {"$pull": {"courses": course_oid}, "$set": {"updated_at": utcnow()}},
            return_document=ReturnDocument.AFTER
        )
        if doc is None:
            raise self.not_found()

        logger.info("course_removed", entity=self.entity.lower(), id=entity_id, course_id=course_id)
        return self.present(doc)
