"""
Conversion between ORM entities and the pydantic transfer records.

The only store access performed here is resolving a post's ``userId``
to an existing user when a record comes in off the wire.
"""
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.exceptions import UserNotFoundError
from blog_api.models import Post, User
from blog_api.schemas import PostCreate, PostResponse, PostUpdate, UserCreate, UserResponse


# ---------------------------------------------------------------------------
# Post
# ---------------------------------------------------------------------------

def to_post_response(post: Post) -> PostResponse:
    """Requires ``post.user`` to be loaded."""
    return PostResponse(
        id=post.id,
        title=post.title,
        content=post.content,
        created_at=post.created_at,
        updated_at=post.updated_at,
        user_id=post.user.id,
        username=post.user.username,
    )


def to_post_response_list(posts: list[Post]) -> list[PostResponse]:
    return [to_post_response(p) for p in posts]


async def to_post_entity(db: AsyncSession, data: PostCreate | PostUpdate) -> Post:
    """
    Build a transient Post from an inbound record.

    Raises UserNotFoundError when ``userId`` is given but does not match
    any user. The returned entity is not added to the session.
    """
    post = Post(title=data.title, content=data.content)
    if data.user_id is not None:
        user = await db.get(User, data.user_id)
        if user is None:
            raise UserNotFoundError(data.user_id)
        post.user = user
        post.user_id = user.id
    return post


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------

def to_user_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, username=user.username, email=user.email)


def to_user_response_list(users: list[User]) -> list[UserResponse]:
    return [to_user_response(u) for u in users]


def to_user_entity(data: UserCreate) -> User:
    # Plaintext here; user_service.create_user hashes it before persisting.
    return User(username=data.username, email=data.email, password=data.password)
