import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

# Import models so every table is registered with SQLAlchemy Base
from . import models  # noqa: F401
from .config import ALLOWED_ORIGINS, LOG_LEVEL, SEED_SAMPLE_DATA
from .database import Base, SessionLocal, engine
from .domain.bookings import router as bookings_router
from .domain.clients import router as clients_router
from .domain.service_offerings import router as service_offerings_router
from .domain.testimonials import router as testimonials_router
from .errors import register_error_handlers
from .request_context import (
    INCOMING_REQUEST_ID_HEADER,
    TRACE_ID_HEADER,
    TraceIdFilter,
    new_trace_id,
    reset_trace_id,
    set_trace_id,
)
from .seed import seed_sample_data

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - [%(trace_id)s] %(message)s",
)
for handler in logging.getLogger().handlers:
    handler.addFilter(TraceIdFilter())
logger = logging.getLogger(__name__)

# Reduce verbosity of third-party libraries
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    try:
        Base.metadata.create_all(bind=engine, checkfirst=True)
        logger.info("Database tables created successfully")
    except Exception as e:
        logger.error(f"Failed to create database tables: {e}")
        raise

    if SEED_SAMPLE_DATA:
        db = SessionLocal()
        try:
            seed_sample_data(db)
        finally:
            db.close()

    yield
    logger.info("Application shutting down...")


app = FastAPI(title="Dance Site API", version="1.0.0", lifespan=lifespan)

register_error_handlers(app)


@app.middleware("http")
async def assign_trace_id(request: Request, call_next):
    """Give every request a trace id for log correlation and error envelopes"""
    trace_id = request.headers.get(INCOMING_REQUEST_ID_HEADER) or new_trace_id()
    request.state.trace_id = trace_id
    token = set_trace_id(trace_id)
    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(f"{request.method} {request.url.path} - Error: {str(e)}")
        raise
    finally:
        reset_trace_id(token)
    response.headers[TRACE_ID_HEADER] = trace_id
    return response


# CORS Configuration
logger.info(f"CORS allowed origins: {ALLOWED_ORIGINS}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["Location", TRACE_ID_HEADER],
)

# Routes
app.include_router(bookings_router)
app.include_router(clients_router)
app.include_router(service_offerings_router)
app.include_router(testimonials_router)


@app.get("/")
def root():
    return {"message": "Dance Site API is running"}


@app.get("/health")
def health():
    return {"status": "healthy"}
