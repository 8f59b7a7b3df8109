"""
Schemas module - Request/Response schemas for API endpoints.

- Request schemas: what the API accepts (validated before any service runs)
- Response schemas: what the API returns (password hashes never included)
"""

from app.schemas.schemas import (
    RegisterRequest, LoginRequest, UserResponse, TokenResponse, RegisterResponse,
    CourseCreate, CourseUpdate, CourseResponse,
    StudentCreate, StudentUpdate, StudentResponse,
    TeacherCreate, TeacherUpdate, TeacherResponse,
    EnrollRequest, MessageResponse, FieldError, ValidationErrorResponse
)
