"""Version 1 API package."""
from verdure_admin.api.v1.api import api_router

__all__ = ["api_router"]
