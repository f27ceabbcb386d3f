import sys
import os
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from app.config import settings
from app.core.logging_config import setup_logging, get_logger
from app.routes import (
    core_router,
    user_router,
    profile_router,
    emergency_contact_router,
    vehicle_router,
    document_router,
    document_expiry_router,
    notification_router,
    stats_router,
    maintenance_router,
)

# Setup logging as early as possible
setup_logging(log_level=settings.LOG_LEVEL.upper(), force_configure=True)

logger = get_logger(__name__)

app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description="Vehicle documents, expiry reminders and notifications",
    version=settings.APP_VERSION,
)

# Set up CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(core_router)
app.include_router(user_router, prefix=settings.API_PREFIX)
app.include_router(profile_router, prefix=settings.API_PREFIX)
app.include_router(emergency_contact_router, prefix=settings.API_PREFIX)
app.include_router(vehicle_router, prefix=settings.API_PREFIX)
app.include_router(document_router, prefix=settings.API_PREFIX)
app.include_router(document_expiry_router, prefix=settings.API_PREFIX)
app.include_router(notification_router, prefix=settings.API_PREFIX)
app.include_router(stats_router, prefix=settings.API_PREFIX)
app.include_router(maintenance_router, prefix=settings.API_PREFIX)

logger.info(f"Environment: {settings.ENV}")


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
