"""cs_blog REST endpoints (mounted under /api).

GET    /posts            list, cache-aside on posts:all
GET    /posts/{post_id}  detail, cache-aside on post:<id>
POST   /posts            create; invalidates posts:all
PUT    /posts/{post_id}  partial update; invalidates posts:all + post:<id>
DELETE /posts/{post_id}  delete; invalidates posts:all + post:<id>
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.cs_blog.application.schemas import CreatePostRequest, UpdatePostRequest
from src.cs_blog.application.service import PostApplicationService
from src.cs_blog.domain.repository import PostRepositoryProtocol
from src.cs_blog.infrastructure.persistence import PostRepository
from src.cs_cache.application.accessor import CacheAsideAccessor
from src.cs_cache.dependencies import get_cache_accessor
from src.cs_common.database import get_db_session
from src.cs_common.response import ApiResponse, success_response

router = APIRouter(prefix="/posts", tags=["posts"])

_repo = PostRepository()


async def get_post_repository() -> PostRepositoryProtocol:
    return _repo


async def get_post_service(
    accessor: Annotated[CacheAsideAccessor, Depends(get_cache_accessor)],
    repo: Annotated[PostRepositoryProtocol, Depends(get_post_repository)],
) -> PostApplicationService:
    return PostApplicationService(accessor, repo=repo)


PostService = Annotated[PostApplicationService, Depends(get_post_service)]
DbSession = Annotated[AsyncSession, Depends(get_db_session)]


@router.get("")
async def list_posts(request: Request, service: PostService, db: DbSession) -> ApiResponse:
    result = await service.list_posts(db)
    return success_response(result.model_dump(mode="json"), request)


@router.get("/{post_id}")
async def get_post(
    post_id: int, request: Request, service: PostService, db: DbSession
) -> ApiResponse:
    result = await service.get_post(db, post_id)
    return success_response(result.model_dump(mode="json"), request)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_post(
    body: CreatePostRequest, request: Request, service: PostService, db: DbSession
) -> ApiResponse:
    post = await service.create_post(db, body.title, body.content, body.author)
    return success_response(post.model_dump(), request)


@router.put("/{post_id}")
async def update_post(
    post_id: int,
    body: UpdatePostRequest,
    request: Request,
    service: PostService,
    db: DbSession,
) -> ApiResponse:
    post = await service.update_post(db, post_id, body.title, body.content)
    return success_response(post.model_dump(), request)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(post_id: int, service: PostService, db: DbSession) -> Response:
    await service.delete_post(db, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
