"""
Static frontend serving with SPA fallback

Registered last: every GET that no API route claimed ends up here.
"""
from pathlib import Path

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse, PlainTextResponse


router = APIRouter(tags=["frontend"])


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_frontend(full_path: str, request: Request):
    """Serve the requested build file, else index.html for client-side routing"""
    if full_path == "api" or full_path.startswith("api/"):
        raise HTTPException(status_code=404, detail="Not found")

    static_dir = Path(request.app.state.settings.static_dir).resolve()

    if full_path:
        file_path = (static_dir / full_path).resolve()
        # stay inside the build directory
        if file_path.is_file() and static_dir in file_path.parents:
            return FileResponse(file_path)

    index_path = static_dir / "index.html"
    if index_path.is_file():
        return FileResponse(index_path, media_type="text/html")

    return PlainTextResponse("Not found", status_code=404)
