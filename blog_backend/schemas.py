from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StatusOut(BaseModel):
    status: str


# ----- Post Schemas -----


class PostCreate(BaseModel):
    # Required fields are checked in crud so a missing value maps to 400.
    title: Optional[str] = None
    content: Optional[str] = None
    tags: List[str] = []
    category_id: int = 0


class PostUpdate(BaseModel):
    """Partial update: a field left out (or sent as null) is not touched."""

    title: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[List[str]] = None


class PostCreated(BaseModel):
    id: int
    slug: str


class PostSummary(BaseModel):
    id: int
    title: str
    slug: str

    model_config = ConfigDict(from_attributes=True)


class PostList(BaseModel):
    posts: List[PostSummary]


class PostOut(BaseModel):
    id: int
    title: str
    slug: str
    content: str
    views: int
    likes: int
    author_id: int
    category_id: int
    tags: List[str]
    is_published: bool
    created_at: str

    model_config = ConfigDict(from_attributes=True)


class PostUpdated(StatusOut):
    id: int


# ----- Category Schemas -----


class CategoryCreate(BaseModel):
    name: Optional[str] = None


class CategoryOut(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class CategoryList(BaseModel):
    categories: List[CategoryOut]


# ----- Comment Schemas -----


class CommentCreate(BaseModel):
    content: Optional[str] = None


class CommentOut(BaseModel):
    id: int
    user_id: int
    content: str

    model_config = ConfigDict(from_attributes=True)


class CommentList(BaseModel):
    comments: List[CommentOut]


class CommentCreated(BaseModel):
    id: int
    post_id: int


# ----- User Schemas -----


class UserOut(BaseModel):
    id: int
    username: str
    role: str
    bio: str

    model_config = ConfigDict(from_attributes=True)


class UserUpdate(BaseModel):
    """Only the bio can be changed through the users endpoint."""

    bio: Optional[str] = None


# ----- Auth Schemas -----


class RegisterIn(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class RegisterOut(StatusOut):
    user_id: int = Field(alias="userId")

    model_config = ConfigDict(populate_by_name=True)


class TokenOut(BaseModel):
    token: str


class IdentityOut(BaseModel):
    id: int
    role: str
