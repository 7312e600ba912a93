"""Pydantic schemas for Teachers and Subjects."""
from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, Field

from events_backend.models.school import Gender


class TeacherAdd(BaseModel):
    name: str = Field(min_length=5)
    gender: Gender = Gender.other
    age: int = Field(ge=18)


class TeacherEdit(BaseModel):
    name: Optional[str] = Field(default=None, min_length=5)
    gender: Optional[Gender] = None
    age: Optional[int] = Field(default=None, ge=18)


class SubjectRef(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class TeacherRef(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class TeacherOut(BaseModel):
    id: int
    name: str
    age: int
    gender: Gender
    subjects: list[SubjectRef] = []

    model_config = {"from_attributes": True}


class PaginatedTeachers(BaseModel):
    total: int
    data: list[TeacherOut]


class EntityWithId(BaseModel):
    id: int


class SubjectAdd(BaseModel):
    name: str = Field(min_length=1)


class SubjectTeachersAdd(BaseModel):
    teacher_ids: list[int] = Field(min_length=1)


class SubjectOut(BaseModel):
    id: int
    name: str
    teachers: list[TeacherRef] = []

    model_config = {"from_attributes": True}
