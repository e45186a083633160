from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from string_analyzer.config import CORS_ORIGINS, LOG_LEVEL, PORT
from string_analyzer.database import init_db
from string_analyzer.api.routes import router

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Body fields sent with the wrong JSON type or undecodable text are 422; missing, null or malformed input is 400
WRONG_TYPE_ERRORS = {"string_type"}
INVALID_VALUE_ERRORS = {"value_error"}

app = FastAPI(
    title="String Analyzer Service",
    description="Analyze, store and filter strings by their computed properties",
    version="1.0.0"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Initialize database on startup
@app.on_event("startup")
def on_startup():
    logger.info("Initializing database...")
    init_db()


# Include routers
app.include_router(router, tags=["strings"])


# Root endpoint
@app.get("/")
def root():
    return {
        "message": "String Analyzer Service",
        "version": "1.0.0",
        "endpoints": {
            "POST /strings": "Analyze and store a string",
            "GET /strings/{string_value}": "Get specific string analysis",
            "GET /strings": "Get all strings with optional filters",
            "GET /strings/filter-by-natural-language": "Filter using natural language",
            "DELETE /strings/{string_value}": "Delete a string",
            "GET /docs": "API documentation"
        }
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


# Validation error handler
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = {}
    status_code = status.HTTP_400_BAD_REQUEST
    body_error = False
    message = None
    for error in exc.errors():
        loc = tuple(error.get('loc', ()))
        field = str(loc[-1]) if loc else "request"
        errors[field] = error['msg']
        body_error = body_error or loc[:1] == ("body",)
        if (
            loc and loc[0] == "body"
            and error.get('type') in WRONG_TYPE_ERRORS
            and error.get('input') is not None
        ):
            status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
            message = "Invalid data type for \"value\" (must be string)"
        elif loc[:1] == ("body",) and error.get('type') in INVALID_VALUE_ERRORS:
            status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
            message = message or "Invalid value for \"value\" (must be valid Unicode text)"

    if message is None:
        if body_error:
            message = "Invalid request body or missing \"value\" field"
        else:
            message = "Invalid query parameter values or types"

    return JSONResponse(
        status_code=status_code,
        content={
            "error": message,
            "details": errors
        }
    )


# HTTPException handler
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # If detail is already a dict with 'error' key, return as is
    if isinstance(exc.detail, dict) and 'error' in exc.detail:
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.detail,
            headers=getattr(exc, "headers", None)
        )
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        detail = f"Route {request.url.path} not found"
    else:
        detail = str(exc.detail)
    # Otherwise wrap it
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": detail},
        headers=getattr(exc, "headers", None)
    )


# Generic error handler
@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error"
        }
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("string_analyzer.main:app", host="0.0.0.0", port=PORT)
