from fastapi import APIRouter

from app.api.v1.endpoints import health, invocations

api_router = APIRouter()
api_router.include_router(invocations.router, tags=["invocations"])
api_router.include_router(health.router, tags=["health"])
