"""Landing page routes.

The page is a single document; every non-API GET path renders it so that
in-page anchors and client-side links survive a reload.
"""

import pathlib

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from starlette.routing import Match

from goloyal.config import settings

router = APIRouter()

TEMPLATES_DIR = pathlib.Path(__file__).parent / "templates"
STATIC_DIR = pathlib.Path(__file__).parent / "static"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

NAV_SECTIONS = [
    ("features", "Features"),
    ("how-it-works", "How It Works"),
    ("integrations", "Integrations"),
    ("testimonials", "Testimonials"),
]


API_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


@router.api_route("/api", methods=API_METHODS, include_in_schema=False)
@router.api_route("/api/{rest:path}", methods=API_METHODS, include_in_schema=False)
async def unknown_api_path(request: Request, rest: str = ""):
    """JSON error for API paths no other route handles.

    A path another route serves with a different method is a 405, not a 404.
    """
    for route in request.app.router.routes:
        if getattr(route, "endpoint", None) is unknown_api_path:
            continue
        if not getattr(route, "path", "").startswith("/api/"):
            continue
        match, _ = route.matches(request.scope)
        if match == Match.PARTIAL:
            raise HTTPException(status_code=405, detail="Method Not Allowed")
    raise HTTPException(status_code=404, detail="Not Found")


@router.get("/{full_path:path}", response_class=HTMLResponse, include_in_schema=False)
async def landing_page(request: Request, full_path: str):
    """Serve the landing page for any path outside the API."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {"app_name": settings.app_name, "nav_sections": NAV_SECTIONS},
    )
