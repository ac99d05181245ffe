# app/router/static.py

import re
from pathlib import Path
from typing import Optional

from fastapi.responses import FileResponse

ENTRY_DOCUMENT = "index.html"

ASSET_PATTERN = re.compile(
    r"\.(js|css|png|jpg|jpeg|gif|ico|svg|woff|woff2|ttf|eot)$", re.IGNORECASE
)
ASSET_CACHE_CONTROL = "public, max-age=31536000, immutable"


def resolve_file(root: Path, path: str) -> Optional[Path]:
    """
    Map a URL path to a file under root, trying the path itself and then
    its index.html. Anything escaping root resolves to None.
    """
    root = root.resolve()
    try:
        candidate = (root / path.lstrip("/")).resolve()

        if candidate != root and root not in candidate.parents:
            return None

        if candidate.is_file():
            return candidate
        if candidate.is_dir() and (candidate / ENTRY_DOCUMENT).is_file():
            return candidate / ENTRY_DOCUMENT
    except (OSError, ValueError):
        # NUL bytes, over-long names and the like never name a real file.
        return None
    return None


def serve(root: Path, path: str) -> FileResponse:
    """
    Serve a static file, or the entry document for any unmatched path.
    """
    target = resolve_file(root, path)

    if target is None:
        return FileResponse(root / ENTRY_DOCUMENT, headers={"Cache-Control": "no-cache"})

    if ASSET_PATTERN.search(target.name):
        return FileResponse(target, headers={"Cache-Control": ASSET_CACHE_CONTROL})
    return FileResponse(target)
