from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from .. import crud, schemas
from ..store import InMemoryStore, get_store

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}", response_model=schemas.UserOut)
def get_user(user_id: int, store: InMemoryStore = Depends(get_store)):
    user = crud.get_user(store, user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.put("/{user_id}", response_model=schemas.StatusOut)
def update_user(
    user_id: int,
    user_in: Optional[schemas.UserUpdate] = None,
    store: InMemoryStore = Depends(get_store),
):
    """Change the bio. A request without a body still answers, leaving the user as is."""
    user = crud.update_user(store, user_id, user_in)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return {"status": "updated"}
