"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from app.api.routes.auth_routes import router as auth_router
from app.api.routes.course_routes import router as course_router
from app.api.routes.student_routes import router as student_router
from app.api.routes.teacher_routes import router as teacher_router
from app.schemas.schemas import ValidationErrorResponse

# Every route can answer 400 with the field-error body built in app.main
validation_responses = {400: {"model": ValidationErrorResponse, "description": "Validation Error"}}

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router, responses=validation_responses)
api_router.include_router(course_router, responses=validation_responses)
api_router.include_router(student_router, responses=validation_responses)
api_router.include_router(teacher_router, responses=validation_responses)
