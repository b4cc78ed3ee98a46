"""API v1 main router
Combines every endpoint router into one API router
"""

from fastapi import APIRouter
from app.api.v1.endpoints import location, navigation, tools

# API v1 main router
api_router = APIRouter()

api_router.include_router(location.router, prefix="/location", tags=["location"])

api_router.include_router(navigation.router, prefix="/navigation", tags=["navigation"])

api_router.include_router(tools.router, prefix="/tools", tags=["tools"])
