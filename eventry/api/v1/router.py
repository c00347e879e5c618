from fastapi import APIRouter

# Admin: organizer dashboards
from eventry.api.v1.admin.dashboard import router as dashboard_router

api_router = APIRouter()

# --- Admin ---
api_router.include_router(dashboard_router)
