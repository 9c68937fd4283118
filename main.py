import logging
import sys

from fastapi import FastAPI, Request, status

from app.core.config import settings
from app.api.api import web_router
from app.api.deps import templates
from app.core.database import engine, masked_url
from app.core.exceptions import NotFoundError
from app.models.models import Base

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

logger.info("Current DB URI: %s", masked_url(settings.SQLALCHEMY_DATABASE_URI))

# Create database tables
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Register, find and edit students",
    version="1.0.0",
)

app.include_router(web_router)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    return templates.TemplateResponse(
        request,
        "not_found.html",
        {"message": str(exc)},
        status_code=status.HTTP_404_NOT_FOUND,
    )


@app.get("/")
def read_root(request: Request):
    return templates.TemplateResponse(request, "welcome.html", {"project_name": settings.PROJECT_NAME})


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
