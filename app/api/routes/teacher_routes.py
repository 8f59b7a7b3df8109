"""
Teacher Routes

POST /teachers - Create teacher (admin)
GET /teachers - List teachers with their courses (public)
GET /teachers/{teacher_id} - Get teacher (public)
PUT /teachers/{teacher_id} - Update teacher (authenticated)
PUT /teachers/{teacher_id}/enroll-course - Assign a course (authenticated)
PUT /teachers/{teacher_id}/remove-course - Unassign a course (authenticated)
DELETE /teachers/{teacher_id} - Delete teacher (admin)
"""

from fastapi import APIRouter, Depends
from pymongo.database import Database
from typing import List

from app.core.auth import authorize
from app.db.mongodb import get_mongo_db
from app.services.teacher_service import TeacherService
from app.schemas.schemas import (
    TeacherCreate, TeacherUpdate, TeacherResponse, EnrollRequest, MessageResponse
)

router = APIRouter(prefix="/teachers", tags=["Teachers"])


def get_teacher_service(db: Database = Depends(get_mongo_db)) -> TeacherService:
    return TeacherService(db)


@router.post("", response_model=TeacherResponse, status_code=201,
             dependencies=[Depends(authorize("admin"))])
async def create_teacher(data: TeacherCreate, service: TeacherService = Depends(get_teacher_service)):
    return service.create(data.model_dump())


@router.get("", response_model=List[TeacherResponse])
async def list_teachers(service: TeacherService = Depends(get_teacher_service)):
    return service.get_all()


@router.get("/{teacher_id}", response_model=TeacherResponse)
async def get_teacher(teacher_id: str, service: TeacherService = Depends(get_teacher_service)):
    return service.get_by_id(teacher_id)


@router.put("/{teacher_id}", response_model=TeacherResponse,
            dependencies=[Depends(authorize("admin", "user"))])
async def update_teacher(
    teacher_id: str,
    data: TeacherUpdate,
    service: TeacherService = Depends(get_teacher_service)
):
    """Update teacher. Only provided fields are updated."""
    return service.update(teacher_id, data.model_dump(exclude_unset=True))


@router.put("/{teacher_id}/enroll-course", response_model=TeacherResponse,
            dependencies=[Depends(authorize("admin", "user"))])
async def enroll_course(
    teacher_id: str,
    data: EnrollRequest,
    service: TeacherService = Depends(get_teacher_service)
):
    """Assign a course to the teacher. Assigning twice is a no-op."""
    return service.enroll_course(teacher_id, data.courseId)


@router.put("/{teacher_id}/remove-course", response_model=TeacherResponse,
            dependencies=[Depends(authorize("admin", "user"))])
async def remove_course(
    teacher_id: str,
    data: EnrollRequest,
    service: TeacherService = Depends(get_teacher_service)
):
    return service.remove_course(teacher_id, data.courseId)


@router.delete("/{teacher_id}", response_model=MessageResponse,
               dependencies=[Depends(authorize("admin"))])
async def delete_teacher(teacher_id: str, service: TeacherService = Depends(get_teacher_service)):
    service.delete(teacher_id)
    return MessageResponse(message="Teacher deleted successfully")
