# src/tech_news/api/endpoints/__init__.py
"""API endpoint modules."""

from .comments import router as comments_router
from .home import router as home_router
from .posts import router as posts_router
from .users import router as users_router

__all__ = [
    "comments_router",
    "home_router",
    "posts_router",
    "users_router",
]
