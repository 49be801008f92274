from fastapi import APIRouter, Depends, HTTPException, status

from .. import crud, schemas
from ..store import InMemoryStore, get_store

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=schemas.CategoryList)
def list_categories(store: InMemoryStore = Depends(get_store)):
    return {"categories": crud.list_categories(store)}


@router.post("", response_model=schemas.CategoryOut)
def create_category(
    category_in: schemas.CategoryCreate,
    store: InMemoryStore = Depends(get_store),
):
    try:
        return crud.create_category(store, category_in)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
