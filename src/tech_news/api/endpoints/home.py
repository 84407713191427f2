"""Server-rendered pages."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from tech_news.api.dependencies import SessionDep
from tech_news.schemas import PostWithComments
from tech_news.services import post_service

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"

router = APIRouter(tags=["pages"])
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@router.get("/", response_class=HTMLResponse)
def homepage(request: Request, db: SessionDep) -> HTMLResponse:
    """Render every post with its vote count, author and comments."""
    posts = [
        PostWithComments.model_validate(post).model_dump()
        for post in post_service.get_home_posts(db)
    ]
    return templates.TemplateResponse(request, "homepage.html", {"posts": posts})
