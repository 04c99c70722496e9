"""
Server‑rendered pages.

Each page hands the Jinja2 templates a list of plain dictionaries
(``books``, ``authors`` or ``years``); templates never see the
pydantic models or the store.
"""

from pathlib import Path

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from book_catalog.app.api.deps import get_query_service
from book_catalog.app.services.book_query_service import BookQueryService

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(default_response_class=HTMLResponse)


@router.get("/")
def index(request: Request):
    return templates.TemplateResponse(request, "index.html", {})


@router.get("/books")
def books_page(request: Request, service: BookQueryService = Depends(get_query_service)):
    books = [item.model_dump() for item in service.list_books()]
    return templates.TemplateResponse(request, "books.html", {"books": books})


@router.get("/authors")
def authors_page(request: Request, service: BookQueryService = Depends(get_query_service)):
    authors = [item.model_dump() for item in service.list_authors()]
    return templates.TemplateResponse(request, "authors.html", {"authors": authors})


@router.get("/years")
def years_page(request: Request, service: BookQueryService = Depends(get_query_service)):
    years = [item.model_dump() for item in service.list_years()]
    return templates.TemplateResponse(request, "years.html", {"years": years})


@router.get("/search")
def search_page(request: Request):
    return templates.TemplateResponse(request, "search.html", {})


@router.get("/create")
def create_page() -> Response:
    # Placeholder; books are created through POST /api/books.
    return Response(status_code=status.HTTP_204_NO_CONTENT)
