from fastapi import APIRouter
from .endpoints import databases

api_router = APIRouter()

# Include database catalog, search and query router
api_router.include_router(
    databases.router, 
    prefix="/databases", 
    tags=["databases"]
)
