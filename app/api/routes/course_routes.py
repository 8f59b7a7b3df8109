"""
Course Routes

POST /courses - Create course (admin)
GET /courses - List courses (public)
GET /courses/{course_id} - Get course (public)
PUT /courses/{course_id} - Update course (user or admin)
DELETE /courses/{course_id} - Delete course (admin)
"""

from fastapi import APIRouter, Depends
from pymongo.database import Database
from typing import List

from app.core.auth import authorize
from app.core.config import get_settings
from app.db.mongodb import get_mongo_db
from app.services.course_service import CourseService
from app.schemas.schemas import CourseCreate, CourseUpdate, CourseResponse, MessageResponse

settings = get_settings()

router = APIRouter(prefix="/courses", tags=["Courses"])


def get_course_service(db: Database = Depends(get_mongo_db)) -> CourseService:
    return CourseService(db)


@router.post("", response_model=CourseResponse, status_code=201,
             dependencies=[Depends(authorize("admin"))])
async def create_course(data: CourseCreate, service: CourseService = Depends(get_course_service)):
    return service.create(data.model_dump())


@router.get("", response_model=List[CourseResponse])
async def list_courses(service: CourseService = Depends(get_course_service)):
    return service.get_all()


@router.get("/{course_id}", response_model=CourseResponse)
async def get_course(course_id: str, service: CourseService = Depends(get_course_service)):
    return service.get_by_id(course_id)


@router.put("/{course_id}", response_model=CourseResponse,
            dependencies=[Depends(authorize("admin", "user"))])
async def update_course(
    course_id: str,
    data: CourseUpdate,
    service: CourseService = Depends(get_course_service)
):
    """Update course. Only provided fields are updated."""
    return service.update(course_id, data.model_dump(exclude_unset=True))


@router.delete("/{course_id}", response_model=MessageResponse,
               dependencies=[Depends(authorize("admin"))])
async def delete_course(course_id: str, service: CourseService = Depends(get_course_service)):
    """
    Delete course.

    Students and teachers keep the id in their course list unless
    CASCADE_COURSE_DELETE is enabled.
    """
    service.delete(course_id, cascade=settings.cascade_course_delete)
    return MessageResponse(message="Course deleted successfully")
