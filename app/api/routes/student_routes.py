"""
Student Routes

POST /students - Create student (admin)
GET /students - List students with their courses (public)
GET /students/{student_id} - Get student (public)
PUT /students/{student_id} - Update student (authenticated)
PUT /students/{student_id}/enroll-course - Enroll in a course (authenticated)
PUT /students/{student_id}/remove-course - Leave a course (authenticated)
DELETE /students/{student_id} - Delete student (admin)
"""

from fastapi import APIRouter, Depends
from pymongo.database import Database
from typing import List

from app.core.auth import authorize
from app.db.mongodb import get_mongo_db
from app.services.student_service import StudentService
from app.schemas.schemas import (
    StudentCreate, StudentUpdate, StudentResponse, EnrollRequest, MessageResponse
)

router = APIRouter(prefix="/students", tags=["Students"])


def get_student_service(db: Database = Depends(get_mongo_db)) -> StudentService:
    return StudentService(db)


@router.post("", response_model=StudentResponse, status_code=201,
             dependencies=[Depends(authorize("admin"))])
async def create_student(data: StudentCreate, service: StudentService = Depends(get_student_service)):
    return service.create(data.model_dump())


@router.get("", response_model=List[StudentResponse])
async def list_students(service: StudentService = Depends(get_student_service)):
    return service.get_all()


@router.get("/{student_id}", response_model=StudentResponse)
async def get_student(student_id: str, service: StudentService = Depends(get_student_service)):
    return service.get_by_id(student_id)


@router.put("/{student_id}", response_model=StudentResponse,
            dependencies=[Depends(authorize("admin", "user"))])
async def update_student(
    student_id: str,
    data: StudentUpdate,
    service: StudentService = Depends(get_student_service)
):
    """Update student. Only provided fields are updated."""
    return service.update(student_id, data.model_dump(exclude_unset=True))


@router.put("/{student_id}/enroll-course", response_model=StudentResponse,
            dependencies=[Depends(authorize("admin", "user"))])
async def enroll_course(
    student_id: str,
    data: EnrollRequest,
    service: StudentService = Depends(get_student_service)
):
    """Enroll student in a course. Enrolling twice is a no-op."""
    return service.enroll_course(student_id, data.courseId)


@router.put("/{student_id}/remove-course", response_model=StudentResponse,
            dependencies=[Depends(authorize("admin", "user"))])
async def remove_course(
    student_id: str,
    data: EnrollRequest,
    service: StudentService = Depends(get_student_service)
):
    return service.remove_course(student_id, data.courseId)


@router.delete("/{student_id}", response_model=MessageResponse,
               dependencies=[Depends(authorize("admin"))])
async def delete_student(student_id: str, service: StudentService = Depends(get_student_service)):
    service.delete(student_id)
    return MessageResponse(message="Student deleted successfully")
