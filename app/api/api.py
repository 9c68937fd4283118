from fastapi import APIRouter

from app.api.endpoints import students

web_router = APIRouter()
web_router.include_router(students.router, prefix="/students", tags=["students"])
