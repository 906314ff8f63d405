"""
FastAPI dependencies for dependency injection.

The service and the settings are created once by create_app() and kept on
app.state; handlers receive them through these providers instead of
importing module-level globals. Tests can swap either one with
app.dependency_overrides.
"""

from fastapi import Request

from shorturl_app.config import Settings
from shorturl_app.services.url_service import URLService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_url_service(request: Request) -> URLService:
    return request.app.state.url_service
