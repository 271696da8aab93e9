from fastapi import APIRouter
from query_console.api.endpoints import console, schema

api_router = APIRouter()

# Combine all sub-routers into one
api_router.include_router(console.router)
api_router.include_router(schema.router)
