"""
School Management API
CRUD service for courses, students and teachers with JWT auth.

Architecture:
- MongoDB: every entity, relationships stored as course id sets
- FastAPI: thin routers over one service class per collection
"""

__version__ = "1.0.0"
