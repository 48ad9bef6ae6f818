"""Style catalog routes."""

from fastapi import APIRouter, HTTPException, Query, status

from avatar_api.elements import ELEMENT_NAMES, is_valid_element
from avatar_api.models.web_schemas import ErrorResponse, InvalidElementResponse, StylesResponse
from avatar_api.styles import list_styles

router = APIRouter(
    tags=["Styles"],
    responses={401: {"model": ErrorResponse}},
)


@router.get("/styles", response_model=StylesResponse)
async def get_styles(element: str = Query(None)):
    """Every style, or the styles of one element."""
    return StylesResponse(styles=list_styles(element))


@router.get(
    "/styles/{element}",
    response_model=StylesResponse,
    responses={400: {"model": InvalidElementResponse}},
)
async def get_element_styles(element: str):
    """Styles of one element."""
    if not is_valid_element(element):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Invalid element", "valid": list(ELEMENT_NAMES)},
        )
    return StylesResponse(styles=list_styles(element))
