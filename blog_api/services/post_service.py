"""
Post service — business logic for the Post aggregate.

Design notes
------------
- ``Post.user`` is declared ``lazy="raise"``; every read here uses
  ``joinedload(Post.user)`` so the mapper can read the owner's id and
  username without another round-trip.
- Service functions flush but do not commit; the transaction boundary
  is owned by the ``get_db`` dependency in the router layer.
- ``is_post_owner`` is not used by any route yet. It is kept for an
  authorization layer to call.
"""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from blog_api.exceptions import UserNotFoundError
from blog_api.models import Post, User

logger = logging.getLogger(__name__)


def _posts_query():
    return select(Post).options(joinedload(Post.user)).order_by(Post.id)


async def _fetch_all(db: AsyncSession, q) -> list[Post]:
    result = await db.execute(q)
    return list(result.unique().scalars().all())


async def get_all_posts(db: AsyncSession) -> list[Post]:
    return await _fetch_all(db, _posts_query())


async def get_post_by_id(db: AsyncSession, post_id: int) -> Post | None:
    result = await db.execute(_posts_query().where(Post.id == post_id))
    return result.unique().scalar_one_or_none()


async def get_posts_by_user_id(db: AsyncSession, user_id: int) -> list[Post]:
    return await _fetch_all(db, _posts_query().where(Post.user_id == user_id))


async def get_posts_by_username(db: AsyncSession, username: str) -> list[Post]:
    q = _posts_query().join(User, Post.user_id == User.id).where(User.username == username)
    return await _fetch_all(db, q)


async def create_post(db: AsyncSession, post: Post, user_id: int) -> Post:
    """
    Attach *post* to the user identified by *user_id* and persist it.

    Raises UserNotFoundError when the user does not exist; nothing is
    written in that case.
    """
    user = await db.get(User, user_id)
    if user is None:
        raise UserNotFoundError(user_id)

    post.user = user
    post.user_id = user.id
    db.add(post)
    await db.flush()
    logger.info("Created post id=%s for user id=%s", post.id, user.id)
    return post


async def update_post(db: AsyncSession, post_id: int, details: Post) -> Post | None:
    """
    Overwrite title and content of post *post_id* with those of *details*.

    Owner and timestamps are left to the store. Returns None when the
    post does not exist.
    """
    post = await get_post_by_id(db, post_id)
    if post is None:
        return None

    post.title = details.title
    post.content = details.content
    await db.flush()
    return post


async def delete_post(db: AsyncSession, post_id: int) -> bool:
    """Returns True on success, False when the post does not exist."""
    post = await db.get(Post, post_id)
    if post is None:
        return False

    await db.delete(post)
    await db.flush()
    logger.info("Deleted post id=%s", post_id)
    return True


async def is_post_owner(db: AsyncSession, post_id: int, user_id: int) -> bool:
    owner_id = await db.scalar(select(Post.user_id).where(Post.id == post_id))
    return owner_id is not None and owner_id == user_id
