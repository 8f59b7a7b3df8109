"""
Student Service - students and their course enrollments.
"""

from app.db.mongodb import COLLECTIONS
from app.services.enrollment_service import EnrollableService


class StudentService(EnrollableService):
    collection_name = COLLECTIONS["students"]
    entity = "Student"
    unique_fields = ("email",)
    conflict_messages = {"email": "Email is already taken by another student"}
