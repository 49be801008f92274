import logging
from datetime import datetime, timezone
from typing import List, Optional

from . import models, schemas
from .store import InMemoryStore

logger = logging.getLogger(__name__)


def slugify(title: str) -> str:
    """Lowercase the title and turn every space into a hyphen.

    Nothing else is stripped or collapsed, and two posts with the same
    title end up with the same slug.
    """
    return title.lower().replace(" ", "-")


def _require(value: Optional[str], message: str) -> str:
    if not value:
        raise ValueError(message)
    return value


# Post CRUD


def list_published_posts(store: InMemoryStore) -> List[models.Post]:
    return store.filter(models.Post, lambda post: post.is_published)


def create_post(
    store: InMemoryStore, post_in: schemas.PostCreate, author_id: int
) -> models.Post:
    """Create a draft post.

    Raises:
        ValueError: if title or content is missing or empty.
    """
    title = _require(post_in.title, "Missing title or content")
    content = _require(post_in.content, "Missing title or content")

    post = models.Post(
        author_id=author_id,
        title=title,
        slug=slugify(title),
        content=content,
        is_published=False,
        created_at=datetime.now(timezone.utc).isoformat(),
        tags=list(post_in.tags),
        category_id=post_in.category_id,
    )
    store.append(post)
    logger.info("Created post id=%s slug=%s", post.id, post.slug)
    return post


def get_post_by_slug(store: InMemoryStore, slug: str) -> Optional[models.Post]:
    # Drafts are returned too; only the listing hides them.
    return store.find(models.Post, lambda post: post.slug == slug)


def update_post(
    store: InMemoryStore, post_id: int, post_in: schemas.PostUpdate
) -> Optional[models.Post]:
    def _apply(post: models.Post) -> None:
        if post_in.title is not None:
            post.title = post_in.title
        if post_in.content is not None:
            post.content = post_in.content
        if post_in.tags is not None:
            post.tags = list(post_in.tags)

    return store.update(models.Post, post_id, _apply)


def delete_post(store: InMemoryStore, post_id: int) -> bool:
    deleted = store.remove(models.Post, post_id)
    if deleted:
        logger.info("Deleted post id=%s", post_id)
    return deleted


def publish_post(store: InMemoryStore, post_id: int) -> Optional[models.Post]:
    def _publish(post: models.Post) -> None:
        post.is_published = True

    post = store.update(models.Post, post_id, _publish)
    if post is not None:
        logger.info("Published post id=%s", post_id)
    return post


# Category CRUD


def list_categories(store: InMemoryStore) -> List[models.Category]:
    return store.filter(models.Category)


def create_category(
    store: InMemoryStore, category_in: schemas.CategoryCreate
) -> models.Category:
    name = _require(category_in.name, "Missing name")
    category = models.Category(name=name)
    store.append(category)
    logger.info("Created category id=%s name=%s", category.id, category.name)
    return category


# Comment CRUD


def list_comments(store: InMemoryStore, post_id: int) -> List[models.Comment]:
    # An unknown post id simply has no comments.
    return store.filter(models.Comment, lambda comment: comment.post_id == post_id)


def create_comment(
    store: InMemoryStore,
    post_id: int,
    comment_in: schemas.CommentCreate,
    user_id: int,
) -> models.Comment:
    content = _require(comment_in.content, "Missing content")
    comment = models.Comment(post_id=post_id, user_id=user_id, content=content)
    store.append(comment)
    logger.info("Created comment id=%s on post id=%s", comment.id, post_id)
    return comment


# User CRUD


def get_user(store: InMemoryStore, user_id: int) -> Optional[models.User]:
    return store.get(models.User, user_id)


def update_user(
    store: InMemoryStore, user_id: int, user_in: Optional[schemas.UserUpdate]
) -> Optional[models.User]:
    def _apply(user: models.User) -> None:
        if user_in is not None and user_in.bio is not None:
            user.bio = user_in.bio

    return store.update(models.User, user_id, _apply)


def register_user(
    store: InMemoryStore,
    user_in: schemas.RegisterIn,
    username: str,
    role: str,
) -> models.User:
    """Append a new account.

    Missing email or password are stored as empty strings. The password is
    stored verbatim and emails are not checked for duplicates. See
    ``models.User``.
    """
    email = user_in.email or ""
    password = user_in.password or ""

    user = models.User(
        username=username,
        email=email,
        password=password,
        role=role,
    )
    store.append(user)
    logger.info("Registered user id=%s role=%s", user.id, user.role)
    return user
