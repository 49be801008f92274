from fastapi import APIRouter, Depends, HTTPException, status

from .. import crud, schemas
from ..config import Settings, get_settings
from ..store import InMemoryStore, get_store

router = APIRouter(prefix="/posts", tags=["posts"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")


@router.get("", response_model=schemas.PostList)
def list_posts(store: InMemoryStore = Depends(get_store)):
    """Return published posts, oldest first."""
    return {"posts": crud.list_published_posts(store)}


@router.post("", response_model=schemas.PostCreated)
def create_post(
    post_in: schemas.PostCreate,
    store: InMemoryStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    try:
        post = crud.create_post(store, post_in, author_id=settings.mock_user_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return post


@router.get("/{slug}", response_model=schemas.PostOut)
def get_post(slug: str, store: InMemoryStore = Depends(get_store)):
    post = crud.get_post_by_slug(store, slug)
    if not post:
        raise _not_found()
    return post


@router.put("/{post_id}", response_model=schemas.PostUpdated)
def update_post(
    post_id: int,
    post_in: schemas.PostUpdate,
    store: InMemoryStore = Depends(get_store),
):
    post = crud.update_post(store, post_id, post_in)
    if not post:
        raise _not_found()
    return {"status": "updated", "id": post.id}


@router.delete("/{post_id}", response_model=schemas.StatusOut)
def delete_post(post_id: int, store: InMemoryStore = Depends(get_store)):
    if not crud.delete_post(store, post_id):
        raise _not_found()
    return {"status": "deleted"}


@router.post("/{post_id}/publish", response_model=schemas.StatusOut)
def publish_post(post_id: int, store: InMemoryStore = Depends(get_store)):
    """Mark a post as published. Publishing twice is harmless."""
    if not crud.publish_post(store, post_id):
        raise _not_found()
    return {"status": "published"}
