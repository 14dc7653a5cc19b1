"""About us domain - singleton site settings document"""

from .router import router

__all__ = ["router"]
