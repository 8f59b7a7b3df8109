"""
Course Service - the course catalogue.

Students and teachers reference courses by id. Deleting a course leaves
those references in place unless cascade is requested.
"""

import structlog

from app.db.mongodb import COLLECTIONS
from app.services.mongo_service import DocumentService, to_object_id

logger = structlog.get_logger()


class CourseService(DocumentService):
    collection_name = COLLECTIONS["courses"]
    entity = "Course"
    unique_fields = ("code",)
    conflict_messages = {"code": "Course code is already in use"}

    def delete(self, course_id: str, cascade: bool = False) -> dict:
        """
        Delete a course.

        With cascade=True the course id is also pulled from every student
        and teacher course set; otherwise those ids are left dangling.
        """
        deleted = super().delete(course_id)

        if cascade:
            course_oid = to_object_id(course_id)
            for name in (COLLECTIONS["students"], COLLECTIONS["teachers"]):
                result = self.db[name].update_many(
                    {"courses": course_oid},
                    {"$pull": {"courses": course_oid}}
                )
                logger.info("course_references_pulled", collection=name, modified=result.modified_count)

        return deleted
