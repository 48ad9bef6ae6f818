"""Pydantic models for the web schemas."""

from typing import List, Union

from pydantic import Field

from avatar_api.elements import ELEMENTS, Element
from .avatar import Style
from .base import CustomBaseModel


class HealthResponse(CustomBaseModel):
    """HealthResponse model."""

    status: str = Field(json_schema_extra={"example": "ok"})
    service: str = Field(json_schema_extra={"example": "avatar-api"})


class ElementResponse(CustomBaseModel):
    """ElementResponse model."""

    element: Element = Field()


class StylesResponse(CustomBaseModel):
    """StylesResponse model."""

    styles: List[Style] = Field()


class ErrorResponse(CustomBaseModel):
    """ErrorResponse model."""

    error: str = Field(json_schema_extra={"example": "Not found"})
    message: Union[str, None] = Field(None)


class InvalidElementResponse(CustomBaseModel):
    """InvalidElementResponse model."""

    error: str = Field(json_schema_extra={"example": "Invalid element"})
    valid: List[str] = Field(json_schema_extra={"example": list(ELEMENTS)})
