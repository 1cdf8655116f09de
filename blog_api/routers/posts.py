from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api import mappers
from blog_api.database import get_db
from blog_api.schemas import PostCreate, PostResponse, PostUpdate
from blog_api.services import post_service

router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.get("", response_model=list[PostResponse])
async def list_posts(db: AsyncSession = Depends(get_db)):
    return mappers.to_post_response_list(await post_service.get_all_posts(db))


@router.get("/user/{user_id}", response_model=list[PostResponse])
async def list_posts_by_user_id(user_id: int, db: AsyncSession = Depends(get_db)):
    return mappers.to_post_response_list(await post_service.get_posts_by_user_id(db, user_id))


@router.get("/username/{username}", response_model=list[PostResponse])
async def list_posts_by_username(username: str, db: AsyncSession = Depends(get_db)):
    return mappers.to_post_response_list(await post_service.get_posts_by_username(db, username))


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: int, db: AsyncSession = Depends(get_db)):
    post = await post_service.get_post_by_id(db, post_id)
    if post is None:
        raise HTTPException(status_code=404, detail="Post not found")
    return mappers.to_post_response(post)


@router.post("", status_code=201, response_model=PostResponse)
async def create_post(data: PostCreate, db: AsyncSession = Depends(get_db)):
    # UserNotFoundError is turned into a 400 by the app-level handler.
    post = await mappers.to_post_entity(db, data)
    saved = await post_service.create_post(db, post, data.user_id)
    return mappers.to_post_response(saved)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(post_id: int, data: PostUpdate, db: AsyncSession = Depends(get_db)):
    details = await mappers.to_post_entity(db, data)
    post = await post_service.update_post(db, post_id, details)
    if post is None:
        raise HTTPException(status_code=404, detail="Post not found")
    return mappers.to_post_response(post)


@router.delete("/{post_id}", response_class=PlainTextResponse)
async def delete_post(post_id: int, db: AsyncSession = Depends(get_db)):
    deleted = await post_service.delete_post(db, post_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Post not found")
    return "Post deleted successfully"
