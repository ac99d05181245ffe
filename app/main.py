import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.api.categories import router as categories_router
from app.api.pages import router as pages_router
from app.api.service import router as service_router
from app.config import settings
from app.log_config import configure_logging
from app.middleware import install_access_log, install_security_headers

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Hayam Wiki API",
    version=settings.VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)
install_security_headers(app)
install_access_log(app)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    # The raw driver message goes back to the caller as-is.
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


app.include_router(service_router)
app.include_router(pages_router)
app.include_router(categories_router)
