"""
User service — lifecycle and credential change for the User aggregate.

Negative outcomes are reported as ``False`` / ``None``; nothing here
raises to signal "not found" or "wrong password". Database errors are
left to propagate to ``get_db``, which rolls the transaction back.

Known limitation: ``delete_user_by_username_and_email`` does not
authenticate the caller. Knowing both fields is enough to delete the
account; closing that gap belongs to an auth layer in front of the API.
"""
import logging

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.models import Post, User
from blog_api.security import hash_password, verify_password

logger = logging.getLogger(__name__)


async def create_user(db: AsyncSession, user: User) -> User:
    """
    Hash the plaintext password carried by *user* and persist it.

    Uniqueness of username/email is not checked here; the router runs
    ``exists_by_username`` / ``exists_by_email`` first.
    """
    user.password = hash_password(user.password)
    db.add(user)
    await db.flush()
    logger.info("Created user id=%s username=%r", user.id, user.username)
    return user


async def get_all_users(db: AsyncSession) -> list[User]:
    result = await db.execute(select(User).order_by(User.id))
    return list(result.scalars().all())


async def get_user_by_username(db: AsyncSession, username: str) -> User | None:
    result = await db.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def exists_by_username(db: AsyncSession, username: str) -> bool:
    return bool(await db.scalar(select(exists().where(User.username == username))))


async def exists_by_email(db: AsyncSession, email: str) -> bool:
    return bool(await db.scalar(select(exists().where(User.email == email))))


async def delete_user_by_username_and_email(
    db: AsyncSession, username: str, email: str
) -> bool:
    """
    Delete the user named *username* if its email equals *email* exactly.

    The user's posts are deleted in the same transaction. Returns False,
    without touching anything, when there is no such user or the email
    does not match.
    """
    user = await get_user_by_username(db, username)
    if user is None or user.email != email:
        return False

    await db.execute(delete(Post).where(Post.user_id == user.id))
    await db.delete(user)
    await db.flush()
    logger.info("Deleted user id=%s username=%r", user.id, username)
    return True


async def change_password(
    db: AsyncSession, username: str, old_password: str, new_password: str
) -> bool:
    """
    Replace the stored hash when *old_password* verifies against it.

    Returns False with no mutation for an unknown username or a
    mismatching old password.
    """
    user = await get_user_by_username(db, username)
    if user is None:
        logger.warning("Password change for unknown username=%r", username)
        return False
    if not verify_password(old_password, user.password):
        logger.warning("Password change rejected for username=%r", username)
        return False

    user.password = hash_password(new_password)
    await db.flush()
    logger.info("Password changed for user id=%s", user.id)
    return True
