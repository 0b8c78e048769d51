# /student-records/app/routers/marks_router.py

from fastapi import APIRouter, Depends, status
from typing import Any, List

from ..models import mark_model
from ..models.common_model import ApiResponse
from ..services import mark_service
from ..services.database_service import DatabaseService, get_db_service
from .responses import error_response

router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[mark_model.Mark],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
    summary="Record a Mark for a Student"
)
def add_mark(mark_create: mark_model.MarkCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        new_mark = mark_service.create_mark(mark_data=mark_create, db=db)
        return ApiResponse[mark_model.Mark](
            success=True,
            data=mark_model.Mark.model_validate(new_mark),
            message="Mark added successfully",
        )
    except Exception as e:
        return error_response(e, "add mark")


@router.put(
    "/{mark_id}",
    response_model=ApiResponse[mark_model.Mark],
    response_model_exclude_unset=True,
    summary="Update a Mark"
)
def update_mark(mark_id: int, mark_update: mark_model.MarkUpdate, db: DatabaseService = Depends(get_db_service)):
    try:
        updated_mark = mark_service.update_mark(mark_id=mark_id, mark_update=mark_update, db=db)
        return ApiResponse[mark_model.Mark](
            success=True,
            data=mark_model.Mark.model_validate(updated_mark),
            message="Mark updated successfully",
        )
    except Exception as e:
        return error_response(e, "update mark")


@router.delete(
    "/{mark_id}",
    response_model=ApiResponse[Any],
    response_model_exclude_unset=True,
    summary="Delete a Mark"
)
def delete_mark(mark_id: int, db: DatabaseService = Depends(get_db_service)):
    try:
        mark_service.delete_mark(mark_id=mark_id, db=db)
        return ApiResponse[Any](success=True, message="Mark deleted successfully")
    except Exception as e:
        return error_response(e, "delete mark")


@router.get(
    "/student/{student_id}",
    response_model=ApiResponse[List[mark_model.MarkWithSubject]],
    response_model_exclude_unset=True,
    summary="Get All Marks for a Student"
)
def get_marks_by_student_id(student_id: int, db: DatabaseService = Depends(get_db_service)):
    try:
        marks = mark_service.list_marks_by_student(student_id=student_id, db=db)
        return ApiResponse[List[mark_model.MarkWithSubject]](
            success=True,
            data=[mark_model.MarkWithSubject.model_validate(m) for m in marks],
        )
    except Exception as e:
        return error_response(e, "get marks")
