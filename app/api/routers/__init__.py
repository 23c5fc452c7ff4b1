"""
app/api/routers package marker.
"""

from app.api.routers.users import router as users_router

__all__ = [
    "users_router",
]
