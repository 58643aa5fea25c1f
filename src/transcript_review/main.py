"""FastAPI application entry point."""

from ddtrace import patch_all
from fastapi import FastAPI

from transcript_review.routes import dashboard_router, health_router, review_router

patch_all()

app = FastAPI(title="Talk Transcript Review")
app.include_router(dashboard_router)
app.include_router(review_router)
app.include_router(health_router)
