"""Teachers, subjects and the subject <-> teacher relation."""
import logging
from typing import Any, Optional

from sqlalchemy.orm import Session

from events_backend.errors import NotFoundError
from events_backend.models.school import Subject, Teacher
from events_backend.services.pagination import PaginationResult, paginate

logger = logging.getLogger(__name__)


def list_teachers(db: Session, limit: Optional[int] = 5, offset: Optional[int] = 0) -> PaginationResult:
    query = db.query(Teacher).order_by(Teacher.id.desc())
    return paginate(query, limit=limit, offset=offset)


def get_teacher(db: Session, teacher_id: int) -> Teacher:
    teacher = db.query(Teacher).filter(Teacher.id == teacher_id).first()
    if not teacher:
        raise NotFoundError("Teacher not found")
    return teacher


def add_teacher(db: Session, payload: dict[str, Any]) -> Teacher:
    teacher = Teacher(**payload)
    db.add(teacher)
    db.commit()
    db.refresh(teacher)
    logger.info("Added teacher '%s' (%s)", teacher.name, teacher.id)
    return teacher


def update_teacher(db: Session, teacher_id: int, updates: dict[str, Any]) -> Teacher:
    teacher = get_teacher(db, teacher_id)
    for field, value in updates.items():
        if value is not None:
            setattr(teacher, field, value)
    db.commit()
    db.refresh(teacher)
    logger.info("Updated teacher %s", teacher_id)
    return teacher


def delete_teacher(db: Session, teacher_id: int) -> int:
    teacher = get_teacher(db, teacher_id)
    db.delete(teacher)
    db.commit()
    logger.info("Deleted teacher %s", teacher_id)
    return teacher_id


def list_subjects(db: Session) -> list[Subject]:
    return db.query(Subject).order_by(Subject.id).all()


def get_subject(db: Session, subject_id: int) -> Subject:
    subject = db.query(Subject).filter(Subject.id == subject_id).first()
    if not subject:
        raise NotFoundError("Subject not found")
    return subject


def add_subject(db: Session, name: str) -> Subject:
    subject = Subject(name=name)
    db.add(subject)
    db.commit()
    db.refresh(subject)
    logger.info("Added subject '%s' (%s)", subject.name, subject.id)
    return subject


def add_teachers_to_subject(db: Session, subject_id: int, teacher_ids: list[int]) -> Subject:
    """Link teachers to a subject. Existing links are left as they are."""
    subject = get_subject(db, subject_id)
    teachers = db.query(Teacher).filter(Teacher.id.in_(teacher_ids)).all()
    missing = set(teacher_ids) - {t.id for t in teachers}
    if missing:
        raise NotFoundError(f"Teacher not found: {', '.join(str(i) for i in sorted(missing))}")

    for teacher in teachers:
        if teacher not in subject.teachers:
            subject.teachers.append(teacher)
    db.commit()
    db.refresh(subject)
    logger.info("Linked teachers %s to subject %s", sorted(teacher_ids), subject_id)
    return subject


def remove_teacher_from_subject(db: Session, subject_id: int, teacher_id: int) -> Subject:
    subject = get_subject(db, subject_id)
    teacher = next((t for t in subject.teachers if t.id == teacher_id), None)
    if teacher is None:
        raise NotFoundError("Teacher is not linked to this subject")

    subject.teachers.remove(teacher)
    db.commit()
    db.refresh(subject)
    logger.info("Unlinked teacher %s from subject %s", teacher_id, subject_id)
    return subject
