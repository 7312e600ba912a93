"""Teacher and Subject ORM models (many-to-many)."""
import enum
from sqlalchemy import Column, ForeignKey, Integer, String, Table, Enum as SAEnum
from sqlalchemy.orm import relationship
from events_backend.database import Base


class Gender(str, enum.Enum):
    male = "Male"
    female = "Female"
    other = "Other"


subject_teachers = Table(
    "subject_teachers",
    Base.metadata,
    Column("subject_id", Integer, ForeignKey("subjects.id", ondelete="CASCADE"), primary_key=True),
    Column("teacher_id", Integer, ForeignKey("teachers.id", ondelete="CASCADE"), primary_key=True),
)


class Teacher(Base):
    __tablename__ = "teachers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    age = Column(Integer, nullable=False)
    gender = Column(SAEnum(Gender), nullable=False, default=Gender.other)

    subjects = relationship(
        "Subject",
        secondary=subject_teachers,
        back_populates="teachers",
        order_by="Subject.id",
    )


class Subject(Base):
    __tablename__ = "subjects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)

    teachers = relationship(
        "Teacher",
        secondary=subject_teachers,
        back_populates="subjects",
        order_by="Teacher.id",
    )
