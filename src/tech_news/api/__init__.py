# src/tech_news/api/__init__.py
"""HTTP routers for the JSON API and the rendered pages."""

from .endpoints import comments_router, home_router, posts_router, users_router

__all__ = [
    "comments_router",
    "home_router",
    "posts_router",
    "users_router",
]
