"""
Database models for the URL shortener.
"""

from .url import UrlMapping

__all__ = ["UrlMapping"]
