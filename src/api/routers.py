from fastapi import APIRouter

from .endpoints import chat
from .endpoints import checklist
from .endpoints import generate
from .endpoints import health
from .endpoints import quiz

# Mounted under /api
api_router = APIRouter()

api_router.include_router(health.database_router, prefix="", tags=["health"])
api_router.include_router(chat.router, prefix="", tags=["chat"])
api_router.include_router(quiz.router, prefix="", tags=["quiz"])
api_router.include_router(checklist.router, prefix="", tags=["checklist"])

# Mounted at the root
root_router = APIRouter()

root_router.include_router(health.router, prefix="", tags=["health"])
root_router.include_router(generate.router, prefix="", tags=["generate"])
