import os

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["landing"])

INDEX_PATH = os.path.join(os.path.dirname(__file__), "..", "static", "index.html")

with open(INDEX_PATH, encoding="utf-8") as index_file:
    INDEX_HTML = index_file.read()


@router.get("/", response_class=HTMLResponse)
async def landing_page():
    """Static page describing the service"""
    return HTMLResponse(INDEX_HTML)
