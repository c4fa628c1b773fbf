"""Landing Page: serves the single static HTML file at the root path."""

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse

router = APIRouter(tags=["pages"])


@router.get("/", include_in_schema=False)
async def index(request: Request):
    return FileResponse(request.app.state.settings.index_page, media_type="text/html")
