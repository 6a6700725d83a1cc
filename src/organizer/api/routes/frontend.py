"""Serving of the built single-page frontend."""
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse


def frontend_router(static_dir: str | Path) -> APIRouter:
    """
    Build a router that serves files from ``static_dir``.

    Any GET that names an existing file inside the directory returns that
    file; every other path returns ``index.html`` so client-side routes load
    the app. Include it after the API routers.

    Args:
        static_dir: Directory holding the built frontend

    Returns:
        Router with a single catch-all GET route
    """
    root = Path(static_dir).resolve()
    index = root / "index.html"
    router = APIRouter(include_in_schema=False)

    @router.get("/{path:path}")
    async def serve_frontend(path: str):
        """Serve a built asset, or index.html for anything else."""
        candidate = (root / path).resolve()
        if path and candidate.is_relative_to(root) and candidate.is_file():
            return FileResponse(candidate)
        return FileResponse(index)

    return router
