# app/main.py
from fastapi import FastAPI
import logging

from app.core.settings import settings
from app.routers.contact import router as contact_router
from app.routers.health import router as health_router

# CORS for the contact endpoints is set per response in app/lib/cors.py,
# so preflights get the exact header set and an empty body.
app = FastAPI(title=settings.api_title)

logging.getLogger("uvicorn.error").info(
    f"[main] cors_profile = {settings.cors_profile}, development = {settings.is_development}"
)

# Routers
app.include_router(contact_router)
app.include_router(health_router)
