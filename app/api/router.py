from fastapi import APIRouter
from app.api.http import health_router, documents_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(documents_router)
