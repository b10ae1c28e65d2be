"""
Top-level API router.

Aggregates resource routers under their prefixes.  Include new
resources here.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/user", tags=["users"])
