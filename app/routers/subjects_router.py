# /student-records/app/routers/subjects_router.py

from fastapi import APIRouter, Depends, status
from typing import List

from ..models import subject_model
from ..models.common_model import ApiResponse
from ..services import subject_service
from ..services.database_service import DatabaseService, get_db_service
from .responses import error_response

router = APIRouter()


@router.get(
    "",
    response_model=ApiResponse[List[subject_model.Subject]],
    response_model_exclude_unset=True,
    summary="Get All Subjects"
)
def get_all_subjects(db: DatabaseService = Depends(get_db_service)):
    try:
        subjects = subject_service.list_subjects(db=db)
        return ApiResponse[List[subject_model.Subject]](
            success=True,
            data=[subject_model.Subject.model_validate(s) for s in subjects],
        )
    except Exception as e:
        return error_response(e, "get subjects")


@router.get(
    "/{subject_id}",
    response_model=ApiResponse[subject_model.Subject],
    response_model_exclude_unset=True,
    summary="Get a Single Subject"
)
def get_subject_by_id(subject_id: int, db: DatabaseService = Depends(get_db_service)):
    try:
        subject = subject_service.get_subject(subject_id=subject_id, db=db)
        return ApiResponse[subject_model.Subject](success=True, data=subject_model.Subject.model_validate(subject))
    except Exception as e:
        return error_response(e, "get subject")


@router.post(
    "",
    response_model=ApiResponse[subject_model.Subject],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a New Subject"
)
def create_subject(subject_create: subject_model.SubjectCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        new_subject = subject_service.create_subject(subject_data=subject_create, db=db)
        return ApiResponse[subject_model.Subject](
            success=True,
            data=subject_model.Subject.model_validate(new_subject),
            message="Subject created successfully",
        )
    except Exception as e:
        return error_response(e, "create subject")
