"""
FastAPI application
Entry point of the bank transfer inquiry API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from transfer_inquiry.api.middleware.request_logging import RequestLoggingMiddleware
from transfer_inquiry.api.v1.dependencies import close_inquiry_service
from transfer_inquiry.api.v1.routers import health, inquiry
from transfer_inquiry.core.config import settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    close_inquiry_service()


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Transfer inquiry facade over the bank transfer gateway",
    version=settings.VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(health.router, prefix=settings.API_V1_STR, tags=["Health"])
app.include_router(inquiry.router, prefix=settings.API_V1_STR, tags=["Inquiry"])


@app.get("/")
async def root():
    """Root status endpoint"""
    return {
        "message": settings.PROJECT_NAME,
        "status": "online",
        "version": settings.VERSION
    }
