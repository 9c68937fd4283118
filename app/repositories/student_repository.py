"""
Student store.

``StudentRepository`` is the interface the web layer depends on;
``SQLAlchemyStudentRepository`` backs it with the application database.
"""
import logging
from abc import ABC, abstractmethod
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.exceptions import StudentNotFoundError
from app.models.models import Student

logger = logging.getLogger(__name__)

# columns copied onto the stored row when an existing student is saved
UPDATABLE_COLUMNS = (
    "student_id",
    "first_name",
    "last_name",
    "sex",
    "birth_date",
    "address",
    "department",
)


class StudentRepository(ABC):
    """Persistence access for Student records."""

    @abstractmethod
    def find_by_last_name(self, last_name: str) -> List[Student]:
        """
        Return every student whose last name starts with ``last_name``.

        An empty string matches all students. No match gives an empty list.
        """
        pass

    @abstractmethod
    def find_by_id(self, id: int) -> Student:
        """
        Return the student with the given id.

        Raises StudentNotFoundError if there is none.
        """
        pass

    @abstractmethod
    def save(self, student: Student) -> Student:
        """
        Insert a new student (assigning its id) or update an existing one.
        """
        pass


class SQLAlchemyStudentRepository(StudentRepository):
    def __init__(self, db: Session):
        self.db = db

    def find_by_last_name(self, last_name: str) -> List[Student]:
        stmt = (
            select(Student)
            .filter(Student.last_name.startswith(last_name, autoescape=True))
            .distinct()
            .order_by(Student.last_name, Student.id)
        )
        students = self.db.execute(stmt).scalars().all()
        logger.debug("Last name prefix %r matched %d student(s)", last_name, len(students))
        return list(students)

    def find_by_id(self, id: int) -> Student:
        student = self.db.get(Student, id)
        if student is None:
            raise StudentNotFoundError(id)
        return student

    def save(self, student: Student) -> Student:
        if student.is_new:
            self.db.add(student)
            self.db.commit()
            self.db.refresh(student)
            logger.info("Created student %s", student.id)
            return student

        stored = self.db.get(Student, student.id)
        if stored is None:
            raise StudentNotFoundError(student.id)
        if stored is not student:
            for column in UPDATABLE_COLUMNS:
                setattr(stored, column, getattr(student, column))
        self.db.add(stored)
        self.db.commit()
        self.db.refresh(stored)
        logger.info("Updated student %s", stored.id)
        return stored
