from fastapi import APIRouter, Depends, HTTPException, status

from .. import crud, schemas
from ..config import Settings, get_settings
from ..store import InMemoryStore, get_store

router = APIRouter(prefix="/posts", tags=["comments"])


@router.get("/{post_id}/comments", response_model=schemas.CommentList)
def list_comments(post_id: int, store: InMemoryStore = Depends(get_store)):
    """Comments on a post in the order they were written.

    The post itself is not looked up, so an unknown id gives an empty list.
    """
    return {"comments": crud.list_comments(store, post_id)}


@router.post("/{post_id}/comments", response_model=schemas.CommentCreated)
def create_comment(
    post_id: int,
    comment_in: schemas.CommentCreate,
    store: InMemoryStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    try:
        comment = crud.create_comment(
            store, post_id, comment_in, user_id=settings.mock_user_id
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return comment
