"""Element and avatar lookups by user id."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from config import Settings
from avatar_api.avatar_generator import build_avatar_response
from avatar_api.dependencies import get_cache_manager, get_settings
from avatar_api.elements import get_element_for_user
from avatar_api.models.avatar import AvatarResponse
from avatar_api.models.web_schemas import ElementResponse, ErrorResponse
from avatar_api.plugins.cache import CacheManager

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Avatars"],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
    },
)


def _require_user_id(user_id: str) -> str:
    if not user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing userId")
    return user_id


@router.get("/element", include_in_schema=False)
@router.get("/element/", include_in_schema=False)
@router.get("/avatar", include_in_schema=False)
@router.get("/avatar/", include_in_schema=False)
async def missing_user_id():
    """Lookups without a user id."""
    _require_user_id("")


@router.get("/element/{user_id}", response_model=ElementResponse)
async def get_element(user_id: str, cache: CacheManager = Depends(get_cache_manager)):
    """Element assigned to a user."""
    _require_user_id(user_id)

    element = cache.get_element(user_id)
    if element is None:
        logger.debug(f"Element cache miss: {user_id}")
        element = get_element_for_user(user_id)
        cache.set_element(user_id, element)

    return ElementResponse(element=element)


@router.get("/avatar/{user_id}", response_model=AvatarResponse)
async def get_avatar(
    user_id: str,
    cache: CacheManager = Depends(get_cache_manager),
    settings: Settings = Depends(get_settings),
):
    """Avatar URL, element and style assigned to a user."""
    _require_user_id(user_id)

    response = cache.get_avatar(user_id)
    if response is None:
        logger.debug(f"Avatar cache miss: {user_id}")
        response = build_avatar_response(user_id, settings.AVATAR_BASE_URL)
        cache.set_avatar(user_id, response)

    return response
