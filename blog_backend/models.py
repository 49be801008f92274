from dataclasses import dataclass, field
from typing import List

ROLES = ("admin", "author", "reader")


@dataclass
class User:
    """A registered account.

    The password is kept exactly as submitted. There is no hashing and no
    credential check anywhere in the service; treat this as a known gap,
    not as behaviour to rely on.
    """

    id: int = 0
    username: str = ""
    email: str = ""
    password: str = ""
    role: str = "reader"
    bio: str = ""


@dataclass
class Post:
    id: int = 0
    author_id: int = 0
    title: str = ""
    slug: str = ""
    content: str = ""
    is_published: bool = False
    created_at: str = ""
    tags: List[str] = field(default_factory=list)
    category_id: int = 0
    views: int = 0
    likes: int = 0


@dataclass
class Comment:
    id: int = 0
    post_id: int = 0
    user_id: int = 0
    content: str = ""
    likes: int = 0
    is_reported: bool = False


@dataclass
class Category:
    id: int = 0
    name: str = ""
