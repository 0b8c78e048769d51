# /student-records/app/routers/students_router.py

from fastapi import APIRouter, Depends, status
from typing import Any, List, Optional

from ..models import student_model
from ..models.common_model import ApiResponse
from ..services import student_service
from ..services.database_service import DatabaseService, get_db_service
from .responses import error_response

router = APIRouter()

# --- STUDENT COLLECTION ENDPOINTS (/api/students) ---

@router.get(
    "",
    response_model=ApiResponse[List[student_model.Student]],
    response_model_exclude_unset=True,
    summary="Get a Page of Students"
)
def get_all_students(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    db: DatabaseService = Depends(get_db_service)
):
    try:
        result = student_service.list_students(db=db, page=page, limit=limit)
        return ApiResponse[List[student_model.Student]](
            success=True,
            data=[student_model.Student.model_validate(s) for s in result["students"]],
            pagination=result["pagination"],
        )
    except Exception as e:
        return error_response(e, "get students")


@router.post(
    "",
    response_model=ApiResponse[student_model.Student],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a New Student"
)
def create_student(student_create: student_model.StudentCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        new_student = student_service.create_student(student_data=student_create, db=db)
        return ApiResponse[student_model.Student](
            success=True,
            data=student_model.Student.model_validate(new_student),
            message="Student created successfully",
        )
    except Exception as e:
        return error_response(e, "create student")

# --- INDIVIDUAL STUDENT ENDPOINTS (/api/students/{student_id}) ---

@router.get(
    "/{student_id}",
    response_model=ApiResponse[student_model.StudentDetails],
    response_model_exclude_unset=True,
    summary="Get a Student with Marks"
)
def get_student_by_id(student_id: int, db: DatabaseService = Depends(get_db_service)):
    try:
        details = student_service.get_student(student_id=student_id, db=db)
        return ApiResponse[student_model.StudentDetails](
            success=True,
            data=student_model.StudentDetails.model_validate(details),
        )
    except Exception as e:
        return error_response(e, "get student")


@router.put(
    "/{student_id}",
    response_model=ApiResponse[student_model.Student],
    response_model_exclude_unset=True,
    summary="Update a Student"
)
def update_student(student_id: int, student_update: student_model.StudentUpdate, db: DatabaseService = Depends(get_db_service)):
    try:
        updated_student = student_service.update_student(student_id=student_id, student_update=student_update, db=db)
        return ApiResponse[student_model.Student](
            success=True,
            data=student_model.Student.model_validate(updated_student),
            message="Student updated successfully",
        )
    except Exception as e:
        return error_response(e, "update student")


@router.delete(
    "/{student_id}",
    response_model=ApiResponse[Any],
    response_model_exclude_unset=True,
    summary="Delete a Student and Their Marks"
)
def delete_student(student_id: int, db: DatabaseService = Depends(get_db_service)):
    try:
        student_service.delete_student(student_id=student_id, db=db)
        return ApiResponse[Any](success=True, message="Student deleted successfully")
    except Exception as e:
        return error_response(e, "delete student")
