"""Teacher and subject API routes."""
import logging
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from events_backend.database import get_db
from events_backend.dependencies import get_current_user
from events_backend.models.user import User
from events_backend.schemas.school import (
    EntityWithId,
    PaginatedTeachers,
    SubjectAdd,
    SubjectOut,
    SubjectTeachersAdd,
    TeacherAdd,
    TeacherEdit,
    TeacherOut,
)
from events_backend.services import school_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/teachers", response_model=PaginatedTeachers)
def list_teachers(
    limit: int = Query(5, ge=0),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    """Teachers with their subjects, newest first."""
    return school_service.list_teachers(db, limit=limit, offset=offset)


@router.get("/teachers/{teacher_id}", response_model=TeacherOut)
def get_teacher(teacher_id: int, db: Session = Depends(get_db)):
    return school_service.get_teacher(db, teacher_id)


@router.post("/teachers", response_model=TeacherOut, status_code=status.HTTP_201_CREATED)
def add_teacher(
    payload: TeacherAdd,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return school_service.add_teacher(db, payload.model_dump())


@router.patch("/teachers/{teacher_id}", response_model=TeacherOut)
def edit_teacher(teacher_id: int, payload: TeacherEdit, db: Session = Depends(get_db)):
    return school_service.update_teacher(db, teacher_id, payload.model_dump(exclude_unset=True))


@router.delete("/teachers/{teacher_id}", response_model=EntityWithId)
def delete_teacher(teacher_id: int, db: Session = Depends(get_db)):
    return {"id": school_service.delete_teacher(db, teacher_id)}


@router.get("/subjects", response_model=list[SubjectOut])
def list_subjects(db: Session = Depends(get_db)):
    return school_service.list_subjects(db)


@router.get("/subjects/{subject_id}", response_model=SubjectOut)
def get_subject(subject_id: int, db: Session = Depends(get_db)):
    return school_service.get_subject(db, subject_id)


@router.post("/subjects", response_model=SubjectOut, status_code=status.HTTP_201_CREATED)
def add_subject(payload: SubjectAdd, db: Session = Depends(get_db)):
    return school_service.add_subject(db, payload.name)


@router.post("/subjects/{subject_id}/teachers", response_model=SubjectOut)
def add_subject_teachers(subject_id: int, payload: SubjectTeachersAdd, db: Session = Depends(get_db)):
    """Link teachers to a subject."""
    return school_service.add_teachers_to_subject(db, subject_id, payload.teacher_ids)


@router.delete("/subjects/{subject_id}/teachers/{teacher_id}", response_model=SubjectOut)
def remove_subject_teacher(subject_id: int, teacher_id: int, db: Session = Depends(get_db)):
    """Unlink a teacher from a subject."""
    return school_service.remove_teacher_from_subject(db, subject_id, teacher_id)
