from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Form, Header
from sqlalchemy.orm import Session

from hypot.core.config import Settings
from hypot.routers.deps import get_app_settings, get_db
from hypot.services import access, pointers, properties

router = APIRouter(prefix="/api/property")


# --- register a new property ---
@router.post("/register")
def register_property(
    id: str = Form(...),
    name: str = Form(...),
    file: str = Form(...),
    public: bool = Form(False),
    access_list: List[str] = Form([]),
    expiry: Optional[datetime] = Form(None),
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    result = properties.register_property(
        db, id, authorization or "", name, file, public, access_list, expiry,
        id_attempts=settings.id_attempts,
    )
    return result.envelope()


# --- get a property, search query is either a property id or a pointer ---
@router.get("/get/{id}/{search_query}")
def get_property(
    id: str,
    search_query: str,
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db),
):
    return properties.get_property(db, id, authorization or "", search_query).envelope()


# --- add a pointer to a property ---
@router.post("/pointer/add")
def add_pointer(
    id: str = Form(...),
    pointer: str = Form(...),
    property: str = Form(...),
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    result = pointers.add_pointer(
        db, id, authorization or "", property, pointer,
        id_attempts=settings.id_attempts,
    )
    return result.envelope()


# --- replace the access list of a property ---
@router.post("/access/update")
def update_access(
    id: str = Form(...),
    property: str = Form(...),
    access_list: List[str] = Form([]),
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db),
):
    return access.update_access_list(db, id, authorization or "", property, access_list).envelope()
