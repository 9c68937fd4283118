from fastapi import Depends
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.repositories.student_repository import SQLAlchemyStudentRepository, StudentRepository

templates = Jinja2Templates(directory=settings.TEMPLATES_DIR)


def get_student_repository(db: Session = Depends(get_db)) -> StudentRepository:
    """
    Student store bound to the request's database session.
    """
    return SQLAlchemyStudentRepository(db)
