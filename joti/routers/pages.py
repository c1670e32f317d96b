from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from joti.core.database import get_db
from joti.core.errors import Z
from joti.schemas.page import PageDraft, PageEdit, PageResponse, PageCreated
from joti.services.markdown_service import render, RenderError
from joti.services.page_service import create_page, edit_page_by_url, read_touch

router = APIRouter(prefix="/pages", tags=["pages"])

Z_STATUS = {
    Z.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    Z.URL_EXISTS: status.HTTP_409_CONFLICT,
    Z.WRONG_EDITCODE: status.HTTP_403_FORBIDDEN,
}

def raise_for_z(z: Z):
    # Z -> code HTTP, le détail interne n'est jamais renvoyé
    if z == Z.OK:
        return
    code = Z_STATUS.get(z)
    if code is None:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="A server error occurred.")
    raise HTTPException(status_code=code, detail=z.message)

def validate_draft(draft: PageDraft) -> PageDraft:
    draft = draft.model_copy(update={
        "title": draft.title.strip(),
        "url": draft.url.strip(),
        "editcode": draft.editcode.strip(),
    })
    if not draft.title:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="Please enter a title")
    if not draft.content:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="Please enter content")
    return draft

# Crée une page
@router.post("", response_model=PageCreated, status_code=status.HTTP_201_CREATED)
def create(draft: PageDraft, db: Session = Depends(get_db)):
    draft = validate_draft(draft)
    page, z, editcode = create_page(db, draft)
    raise_for_z(z)
    return PageCreated(**PageResponse.model_validate(page).model_dump(), editcode=editcode)

@router.get("/{url}", response_model=PageResponse)
def get_page(url: str, db: Session = Depends(get_db)):
    # Lecture = touch de last_read_at
    page, z = read_touch(db, url)
    raise_for_z(z)
    response = PageResponse.model_validate(page)
    try:
        response.html = render(page.content)
    except RenderError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="A server error occurred.")
    return response

@router.put("/{url}", response_model=PageResponse)
def update_page(url: str, data: PageEdit, db: Session = Depends(get_db)):
    draft = validate_draft(PageDraft(**data.model_dump(exclude={"current_editcode"})))
    page, z = edit_page_by_url(db, url, draft, data.current_editcode)
    raise_for_z(z)
    return page
