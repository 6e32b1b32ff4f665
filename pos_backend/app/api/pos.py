"""POS page shell."""

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from pos_backend.app.core.settings import get_settings
from pos_backend.app.db.session import get_db
from pos_backend.app.services.catalog import list_categories

router = APIRouter(tags=["pos"])
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[1] / "templates"))


@router.get("/", response_class=HTMLResponse)
def pos_page(request: Request, db: Session = Depends(get_db)):
    """Render the POS page with the category select pre-populated."""
    return templates.TemplateResponse(
        request,
        "pos.html",
        {"title": get_settings().app_name, "categories": list_categories(db)},
    )
