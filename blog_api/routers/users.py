from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api import mappers
from blog_api.database import get_db
from blog_api.schemas import PasswordChange, UserCreate, UserResponse
from blog_api.services import user_service

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)):
    return mappers.to_user_response_list(await user_service.get_all_users(db))


@router.post("", status_code=201, response_model=UserResponse)
async def create_user(data: UserCreate, db: AsyncSession = Depends(get_db)):
    if await user_service.exists_by_username(db, data.username):
        raise HTTPException(status_code=400, detail="Username is already taken")
    if await user_service.exists_by_email(db, data.email):
        raise HTTPException(status_code=400, detail="Email is already in use")

    try:
        user = await user_service.create_user(db, mappers.to_user_entity(data))
    except IntegrityError:
        # Lost a race against a concurrent registration.
        raise HTTPException(
            status_code=400,
            detail="A user with this username or email already exists",
        )
    return mappers.to_user_response(user)


@router.delete("", response_class=PlainTextResponse)
async def delete_user(
    username: str = Query(...),
    email: str = Query(...),
    db: AsyncSession = Depends(get_db),
):
    deleted = await user_service.delete_user_by_username_and_email(db, username, email)
    if not deleted:
        raise HTTPException(status_code=404, detail="User not found or details do not match")
    return "User deleted successfully"


@router.put("/password", response_class=PlainTextResponse)
async def change_password(data: PasswordChange, db: AsyncSession = Depends(get_db)):
    changed = await user_service.change_password(
        db, data.username, data.old_password, data.new_password
    )
    if not changed:
        raise HTTPException(status_code=401, detail="Incorrect username or old password")
    return "Password changed successfully"
