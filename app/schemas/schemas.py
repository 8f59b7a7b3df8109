"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.

Request schemas use StrictStr/StrictInt: a JSON "3" is not a number and
a JSON 3 is not a string. Update schemas repeat the create rules with every
field optional, so a partial update is validated exactly like a create.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StrictInt, StrictStr
from typing import Optional, List, Literal
from datetime import datetime


# ============================================================
# AUTH SCHEMAS
# ============================================================

class RegisterRequest(BaseModel):
    username: StrictStr = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: StrictStr = Field(..., min_length=6)
    role: Optional[Literal["admin", "user"]] = None


class LoginRequest(BaseModel):
    email: EmailStr
    password: StrictStr


class UserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    username: str
    email: str
    role: str
    created_at: Optional[datetime] = None


class TokenResponse(BaseModel):
    token: str


class RegisterResponse(BaseModel):
    token: str
    user: UserResponse


# ============================================================
# COURSE SCHEMAS
# ============================================================

class CourseCreate(BaseModel):
    title: StrictStr
    code: StrictStr
    credits: StrictInt = Field(..., ge=1)


class CourseUpdate(BaseModel):
    title: Optional[StrictStr] = None
    code: Optional[StrictStr] = None
    credits: Optional[StrictInt] = Field(None, ge=1)


class CourseResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    title: str
    code: str
    credits: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# ============================================================
# STUDENT SCHEMAS
# ============================================================

class StudentCreate(BaseModel):
    name: StrictStr = Field(..., min_length=2)
    email: EmailStr
    age: StrictInt = Field(..., ge=1, le=120)


class StudentUpdate(BaseModel):
    name: Optional[StrictStr] = Field(None, min_length=2)
    email: Optional[EmailStr] = None
    age: Optional[StrictInt] = Field(None, ge=1, le=120)


class StudentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: str
    email: str
    age: int
    courses: List[CourseResponse] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# ============================================================
# TEACHER SCHEMAS
# ============================================================

class TeacherCreate(BaseModel):
    name: StrictStr = Field(..., min_length=2)
    email: EmailStr


class TeacherUpdate(BaseModel):
    name: Optional[StrictStr] = Field(None, min_length=2)
    email: Optional[EmailStr] = None


class TeacherResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: str
    email: str
    courses: List[CourseResponse] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# ============================================================
# ENROLLMENT SCHEMAS
# ============================================================

class EnrollRequest(BaseModel):
    """Body of both enroll-course and remove-course."""
    courseId: StrictStr


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str


class FieldError(BaseModel):
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    message: str = "Validation Error"
    errors: List[FieldError]
