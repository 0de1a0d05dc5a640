"""FastAPI application setup."""
from fastapi import FastAPI
from routers import unzip, health

app = FastAPI(
    title="File Unzip API",
    description="Extracts blob archives, uploads their files and notifies a Service Bus topic",
    version="1.0.0"
)

# Include routers
app.include_router(unzip.router, prefix="/api/unzip", tags=["Unzip"])
app.include_router(health.router, tags=["Health"])
