from typing import Optional

from fastapi import APIRouter, Depends, Form, Header
from sqlalchemy.orm import Session

from hypot.core.config import Settings
from hypot.routers.deps import get_app_settings, get_db
from hypot.services import identity

router = APIRouter(prefix="/api")


@router.post("/register")
def register(
    username: str = Form(...),
    name: str = Form(...),
    password: str = Form(...),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    result = identity.register_user(
        db, username, name, password,
        hash_method=settings.password_hash_method,
        id_attempts=settings.id_attempts,
    )
    return result.envelope()


@router.post("/login")
def login(
    username: str = Form(...),
    password: str = Form(...),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    result = identity.login_user(db, username, password, id_attempts=settings.id_attempts)
    return result.envelope()


@router.post("/logout")
def logout(
    id: str = Form(...),
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db),
):
    return identity.logout_user(db, id, authorization or "").envelope()


@router.get("/user/get/{id}")
def user_data(id: str, authorization: Optional[str] = Header(None), db: Session = Depends(get_db)):
    return identity.get_user_data(db, id, authorization or "").envelope()
