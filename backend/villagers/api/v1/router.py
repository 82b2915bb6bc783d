"""Aggregate router for API v1."""
from fastapi import APIRouter

from .villagers import router as villagers_router

router = APIRouter()
router.include_router(villagers_router, prefix="/villagers", tags=["villagers"])
