from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from .core import config
from .core.database import engine, Base
from .core.exceptions import AppError, ServerError
from .core.forms import format_errors
from .auth import router as auth_router
from .catalog import CATALOG_KINDS, routers as catalog_routers
from .news import router as news_router
import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = FastAPI(title="MLD Site Backend")

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create tables when starting up
try:
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created successfully")
except Exception as e:
    logger.error(f"Error creating database tables: {str(e)}")
    raise


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    return JSONResponse(
        status_code=400,
        content={"detail": format_errors(errors) or "Invalid request data"},
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}: {str(exc)}", exc_info=exc)
    error = ServerError(f"Database error: {str(exc)}" if config.DEBUG else None)
    return JSONResponse(status_code=error.status_code, content={"detail": error.detail})


# Exception handler for generic exceptions
@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {str(exc)}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"detail": f"Internal server error: {str(exc)}" if config.DEBUG else "Internal server error"}
    )


# Health check endpoint
@app.get("/health")
def health_check():
    return {"status": "healthy"}


# Include routers
app.include_router(auth_router)
app.include_router(news_router)
for kind in CATALOG_KINDS:
    primary, *aliases = kind.prefixes
    app.include_router(catalog_routers[kind.name], prefix=primary)
    for alias in aliases:
        app.include_router(catalog_routers[kind.name], prefix=alias, include_in_schema=False)

# File upload được phục vụ lại dưới /uploads/<thư mục>/<file>
app.mount(config.UPLOAD_URL_PREFIX, StaticFiles(directory=config.UPLOAD_DIR, check_dir=False), name="uploads")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("mld.main:app", host="0.0.0.0", port=config.PORT, log_level="info")
