from typing import Annotated

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import PlainTextResponse

from shorturl_app.config import Settings
from shorturl_app.dependencies import get_settings, get_url_service
from shorturl_app.schemas.url import UrlPayload
from shorturl_app.services.url_service import URLService

router = APIRouter(tags=["urls"])


def build_short_url(root_url: str, identifier: str) -> str:
    return f"{root_url.rstrip('/')}/{identifier}"


@router.post("/", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED)
async def create_short_url(
    payload: Annotated[UrlPayload, Form()],
    url_service: URLService = Depends(get_url_service),
    settings: Settings = Depends(get_settings),
):
    """
    Shorten the submitted URL.

    The same URL always maps to the same identifier; every submission
    counts one hit. The body is the full short link.
    """
    identifier = await url_service.shorten(payload.url)
    return PlainTextResponse(
        build_short_url(settings.root_url, identifier),
        status_code=status.HTTP_201_CREATED,
    )
