"""
Teacher Service - teachers and the courses they are assigned to.
"""

from app.db.mongodb import COLLECTIONS
from app.services.enrollment_service import EnrollableService


class TeacherService(EnrollableService):
    collection_name = COLLECTIONS["teachers"]
    entity = "Teacher"
    unique_fields = ("email",)
    conflict_messages = {"email": "Email is already taken by another teacher"}
