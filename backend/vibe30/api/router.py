from fastapi import APIRouter
from vibe30.api.routers import auth, buckets, timers, items

api_router = APIRouter()
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(buckets.router, prefix="/buckets", tags=["buckets"])
api_router.include_router(timers.router, prefix="/timers", tags=["timers"])
api_router.include_router(items.router, prefix="/api/items", tags=["items"])
