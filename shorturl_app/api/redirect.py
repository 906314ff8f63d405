from fastapi import APIRouter, Depends, Response, status

from shorturl_app.dependencies import get_url_service
from shorturl_app.services.url_service import URLService

router = APIRouter(tags=["redirect"])


@router.get("/{short_code}")
async def redirect_to_long_url(
    short_code: str,
    url_service: URLService = Depends(get_url_service),
):
    """Redirect to the original URL; 404 with an empty body if unknown."""
    long_url = await url_service.resolve(short_code)

    if long_url is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    # RedirectResponse would percent-quote the URL. Send the stored text
    # byte for byte instead (Starlette encodes header values as latin-1).
    location = long_url.encode("utf-8").decode("latin-1")
    return Response(status_code=status.HTTP_302_FOUND, headers={"location": location})
