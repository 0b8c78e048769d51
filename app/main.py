# /student-records/app/main.py

# --- Core FastAPI Imports ---
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

# --- Application-specific Imports ---
from .config import AUTO_CREATE_TABLES, CORS_ORIGINS
from .db.base import Base
from .db.database import engine
from .error_handlers import add_error_handlers
from .routers import students_router, subjects_router, marks_router
from .utils.logger import get_logger

logger = get_logger(__name__)


def check_database_connection() -> bool:
    """Runs a trivial query so a misconfigured DATABASE_URL shows up at startup."""
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("Database connected successfully")
        return True
    except SQLAlchemyError as e:
        logger.error(f"Database connection failed: {e}")
        return False


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # This code runs ONCE when the application starts up.
    if check_database_connection() and AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
    yield
    # This code runs ONCE when the application shuts down.
    engine.dispose()


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Student Records API",
    description="Students, subjects and marks for the student management web client.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

add_error_handlers(app)

# --- API Router Inclusion ---
app.include_router(students_router.router, prefix="/api/students", tags=["Students"])
app.include_router(subjects_router.router, prefix="/api/subjects", tags=["Subjects"])
app.include_router(marks_router.router, prefix="/api/marks", tags=["Marks"])


# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "Student Management API is running", "version": app.version}
