# src/tech_news/services/__init__.py
"""Business logic services for the Tech News application."""

from . import comment_service, post_service, user_service

__all__ = ["comment_service", "post_service", "user_service"]
