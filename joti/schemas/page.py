from pydantic import BaseModel, ConfigDict, field_validator
from datetime import datetime
from typing import Optional

# bcrypt ne hash que 72 octets (pas caractères: "é" = 2 octets)
EDITCODE_MAX_BYTES = 72

def editcode_too_long(code: str) -> bool:
    return len(code.encode()) > EDITCODE_MAX_BYTES

# Schemas pour les pages

class PageDraft(BaseModel):
    """Champs envoyés par l'utilisateur, pas encore persistés"""
    title: str = ""
    content: str = ""
    url: str = ""
    author: str = ""
    editcode: str = ""
    created_at: Optional[datetime] = None
    last_read_at: Optional[datetime] = None

    @field_validator("editcode")
    @classmethod
    def check_editcode_bytes(cls, v: str) -> str:
        if editcode_too_long(v):
            raise ValueError(f"edit code must be at most {EDITCODE_MAX_BYTES} bytes")
        return v

class PageEdit(PageDraft):
    # code qui autorise la modif (le champ editcode du draft sert à le remplacer)
    current_editcode: str

    @field_validator("current_editcode")
    @classmethod
    def check_current_editcode_bytes(cls, v: str) -> str:
        if editcode_too_long(v):
            raise ValueError(f"edit code must be at most {EDITCODE_MAX_BYTES} bytes")
        return v

class PageResponse(BaseModel):
    id: int
    title: str
    url: str
    content: str
    description: str
    author: str
    created_at: datetime
    last_read_at: datetime
    html: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

class PageCreated(PageResponse):
    # le seul moment où le code d'édition est montré
    editcode: str
