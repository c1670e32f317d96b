"""Pages HTML: formulaire, page rendue, édition, howto/about"""

from pathlib import Path
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session
from joti.core.database import get_db
from joti.core.errors import Z
from joti.schemas.page import PageDraft, EDITCODE_MAX_BYTES, editcode_too_long
from joti.services.markdown_service import render, RenderError
from joti.services.page_service import create_page, edit_page_by_url, read_touch
from joti.services.page_store import PageStore

router = APIRouter(tags=["site"])

templates = Jinja2Templates(directory=str(Path(__file__).parent.parent / "templates"))

SERVER_ERROR = "A server error occurred."


def form_error(z: Z) -> str:
    # DBERR -> message générique, jamais le détail
    if z == Z.DBERR:
        return SERVER_ERROR
    return z.message


def form_draft(title: str, content: str, url: str, editcode: str) -> tuple[PageDraft, str]:
    editcode = editcode.strip()
    long_code = editcode_too_long(editcode)
    draft = PageDraft(
        title=title.strip(),
        content=content,
        url=url.strip(),
        editcode="" if long_code else editcode,
    )
    if long_code:
        return draft, f"Edit code must be at most {EDITCODE_MAX_BYTES} bytes"
    if not draft.title:
        return draft, "Please enter a title"
    if not draft.content:
        return draft, "Please enter content"
    return draft, ""


@router.get("/", response_class=HTMLResponse)
def new_page_form(request: Request):
    return templates.TemplateResponse(request, "new.html", {"draft": PageDraft(), "errmsg": ""})


@router.post("/", response_class=HTMLResponse)
def new_page(
    request: Request,
    title: str = Form(""),
    content: str = Form(""),
    url: str = Form(""),
    editcode: str = Form(""),
    db: Session = Depends(get_db),
):
    draft, errmsg = form_draft(title, content, url, editcode)
    if not errmsg:
        page, z, code = create_page(db, draft)
        if z == Z.OK:
            return templates.TemplateResponse(request, "created.html", {"page": page, "editcode": code})
        errmsg = form_error(z)
    return templates.TemplateResponse(request, "new.html", {"draft": draft, "errmsg": errmsg}, status_code=400)


@router.get("/howto", response_class=HTMLResponse)
def howto(request: Request):
    return templates.TemplateResponse(request, "howto.html", {})


@router.get("/about", response_class=HTMLResponse)
def about(request: Request):
    return templates.TemplateResponse(request, "about.html", {})


@router.get("/{url}", response_class=HTMLResponse)
def view_page(request: Request, url: str, db: Session = Depends(get_db)):
    page, z = read_touch(db, url)
    if z == Z.NOT_FOUND:
        return templates.TemplateResponse(request, "error.html", {"errmsg": "Page not found"}, status_code=404)
    if z != Z.OK:
        return templates.TemplateResponse(request, "error.html", {"errmsg": SERVER_ERROR}, status_code=500)
    try:
        html = render(page.content)
    except RenderError:
        return templates.TemplateResponse(request, "error.html", {"errmsg": SERVER_ERROR}, status_code=500)
    return templates.TemplateResponse(request, "page.html", {"page": page, "html": html})


@router.get("/{url}/edit", response_class=HTMLResponse)
def edit_page_form(request: Request, url: str, db: Session = Depends(get_db)):
    page, z = PageStore(db).get_by_url(url)
    if z != Z.OK:
        status_code = 404 if z == Z.NOT_FOUND else 500
        return templates.TemplateResponse(request, "error.html", {"errmsg": form_error(z)}, status_code=status_code)
    # le code d'édition n'est jamais pré-rempli
    draft = PageDraft(title=page.title, content=page.content, url=page.url, author=page.author)
    return templates.TemplateResponse(request, "edit.html", {"url": url, "draft": draft, "errmsg": ""})


@router.post("/{url}/edit", response_class=HTMLResponse)
def edit_page(
    request: Request,
    url: str,
    title: str = Form(""),
    content: str = Form(""),
    new_url: str = Form("", alias="url"),
    current_editcode: str = Form(""),
    db: Session = Depends(get_db),
):
    draft, errmsg = form_draft(title, content, new_url, "")
    if not errmsg:
        page, z = edit_page_by_url(db, url, draft, current_editcode)
        if z == Z.OK:
            return templates.TemplateResponse(request, "edited.html", {"page": page})
        errmsg = form_error(z)
    return templates.TemplateResponse(request, "edit.html", {"url": url, "draft": draft, "errmsg": errmsg}, status_code=400)
