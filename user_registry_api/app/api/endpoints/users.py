"""
User endpoints.

CRUD over ``/api/user``.  Handlers only bind HTTP to ``UserService``;
validation failures and unknown ids surface as exceptions that the
handlers in ``core.errors`` turn into 400 and 404 responses.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Request, Response, status

from user_registry_api.app.core.cache import ObjectCache, get_user_cache
from user_registry_api.app.schemas.user import SimpleError, User
from user_registry_api.app.services.user_service import UserService

router = APIRouter()

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": SimpleError},
}


def get_user_service(cache: ObjectCache = Depends(get_user_cache)) -> UserService:
    return UserService(cache)


@router.post(
    "",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
async def create_user(
    request: Request,
    response: Response,
    user: Optional[User] = Body(None),
    service: UserService = Depends(get_user_service),
) -> User:
    """Create a user and point ``Location`` at the new resource."""
    created = await service.create_user(user)
    response.headers["Location"] = str(request.url_for("get_user", user_id=str(created.id)))
    return created


@router.get("", response_model=List[User])
async def list_users(service: UserService = Depends(get_user_service)) -> List[User]:
    return await service.list_users()


@router.get(
    "/{user_id}",
    name="get_user",
    response_model=User,
    responses={**ERROR_RESPONSES, status.HTTP_404_NOT_FOUND: {"description": "Unknown id"}},
)
async def get_user(user_id: UUID, service: UserService = Depends(get_user_service)) -> User:
    return await service.get_user(user_id)


@router.put(
    "",
    response_model=User,
    responses={**ERROR_RESPONSES, status.HTTP_404_NOT_FOUND: {"description": "Unknown id"}},
)
async def update_user(
    user: Optional[User] = Body(None),
    service: UserService = Depends(get_user_service),
) -> User:
    """Replace every field of an existing user.  The id comes from the body."""
    return await service.update_user(user)


@router.delete("/{user_id}", responses=ERROR_RESPONSES)
async def delete_user(user_id: UUID, service: UserService = Depends(get_user_service)) -> Response:
    """Delete a user.  Deleting an unknown id still succeeds."""
    await service.delete_user(user_id)
    return Response(status_code=status.HTTP_200_OK)
