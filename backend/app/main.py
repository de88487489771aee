from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.routers import slugs_router
from app.utils.exceptions import CMSException

app = FastAPI(
    title="CMS API",
    description="Content management API: slug generation and uniqueness",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",  # Frontend development
        "http://localhost:8080",  # Alternative frontend port
    ],
    allow_credentials=True,
    allow_methods=["*"],         # Allow all HTTP methods
    allow_headers=["*"],         # Allow all headers
)

# Exception handlers
@app.exception_handler(CMSException)
async def cms_exception_handler(request: Request, exc: CMSException):
    status_code_map = {
        "AUTHENTICATION_ERROR": status.HTTP_401_UNAUTHORIZED,
        "AUTHORIZATION_ERROR": status.HTTP_403_FORBIDDEN,
        "VALIDATION_ERROR": status.HTTP_422_UNPROCESSABLE_ENTITY,
        "INVALID_METHOD": status.HTTP_422_UNPROCESSABLE_ENTITY,
        "NOT_FOUND_ERROR": status.HTTP_404_NOT_FOUND,
        "CONFLICT_ERROR": status.HTTP_409_CONFLICT,
        "PERSISTENCE_CONFLICT": status.HTTP_409_CONFLICT,
        "SLUG_EXHAUSTED": status.HTTP_409_CONFLICT,
        "PERSISTENCE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
    }

    status_code = status_code_map.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    content = {
        "error": exc.code,
        "message": exc.message,
        "detail": str(exc)
    }
    # Itemized slug rule failures
    if getattr(exc, "errors", None):
        content["errors"] = exc.errors

    return JSONResponse(status_code=status_code, content=content)


# Include routers
app.include_router(slugs_router)

# Health check
@app.get("/health")
def health_check():
    return {"status": "healthy", "service": "CMS API"}

# Root endpoint
@app.get("/")
def root():
    return {
        "message": "Welcome to CMS API",
        "docs": "/docs",
        "version": "1.0.0",
    }
