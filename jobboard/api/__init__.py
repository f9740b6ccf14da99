"""
API package.
"""
from jobboard.api.routes import api_router
from jobboard.api.deps import (
    get_current_user,
    get_admin_user,
    get_admin_or_self,
)

__all__ = [
    "api_router",
    "get_current_user",
    "get_admin_user",
    "get_admin_or_self",
]
