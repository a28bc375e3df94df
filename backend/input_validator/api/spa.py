"""Production static serving — built form bundle plus SPA fallback."""

from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException
from starlette.types import Scope

import structlog

logger = structlog.get_logger()


class SPAStaticFiles(StaticFiles):
    """Serves bundle files; unknown GET/HEAD paths get index.html.

    Other methods on unmatched paths are plain 404s.
    """

    async def get_response(self, path: str, scope: Scope):
        if scope["method"] not in ("GET", "HEAD"):
            raise HTTPException(status_code=404)
        try:
            return await super().get_response(path, scope)
        except HTTPException as exc:
            if exc.status_code != 404:
                raise
            return await super().get_response("index.html", scope)


def register_spa(app: FastAPI, static_dir: str) -> bool:
    """Mount the bundle at the root. Must run after every other route.

    Returns:
        True if the bundle exists and was mounted
    """
    root = Path(static_dir).resolve()
    if not (root / "index.html").is_file():
        logger.warning("static_bundle_missing", static_dir=str(root))
        return False

    app.mount("/", SPAStaticFiles(directory=root, html=True), name="static")

    logger.info("static_bundle_mounted", static_dir=str(root))
    return True
