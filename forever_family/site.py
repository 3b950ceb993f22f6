"""
Static site serving: files under the site directory, with ``index.html``
as the fallback for every other GET.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from forever_family.config import Settings, get_settings
from forever_family.errors import NotFoundError

INDEX_FILE = "index.html"

router = APIRouter()


def resolve_site_file(site_dir: str, request_path: str) -> Path:
    root = Path(site_dir).resolve()
    if request_path:
        candidate = (root / request_path).resolve()
        if candidate.is_file() and root in candidate.parents:
            return candidate
    index = root / INDEX_FILE
    if not index.is_file():
        raise NotFoundError()
    return index


@router.get("/{full_path:path}", include_in_schema=False)
def serve_site(full_path: str, settings: Settings = Depends(get_settings)):
    return FileResponse(resolve_site_file(settings.site_dir, full_path))
