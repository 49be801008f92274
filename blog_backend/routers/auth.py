"""Stub authentication.

None of these endpoints verify anything: login hands out a fixed token and
``/me`` always answers with the configured mock identity.
"""

from fastapi import APIRouter, Depends

from .. import crud, schemas
from ..config import Settings, get_settings
from ..store import InMemoryStore, get_store

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=schemas.RegisterOut)
def register(
    user_in: schemas.RegisterIn,
    store: InMemoryStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    user = crud.register_user(
        store,
        user_in,
        username=settings.registered_username,
        role=settings.registered_role,
    )
    return {"status": "registered", "userId": user.id}


@router.post("/login", response_model=schemas.TokenOut)
def login(settings: Settings = Depends(get_settings)):
    return {"token": settings.mock_token}


@router.get("/me", response_model=schemas.IdentityOut)
def me(settings: Settings = Depends(get_settings)):
    return {"id": settings.mock_user_id, "role": settings.mock_user_role}
