"""Middleware for the URL shortener app."""

from .logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
