"""
Pydantic schemas for record albums.

An album is identified by an externally assigned string ``id``; the
server never generates identifiers.  ``price`` must be a finite JSON
number; strings are not coerced, and infinities or ``NaN`` are
rejected.  There is no range validation.  The wire representation
uses exactly the four field names declared on ``Album``.
"""

from typing import List, Union

from pydantic import BaseModel, Field


class Album(BaseModel):
    """Schema for an album, used both as request body and response."""

    id: str = Field(..., description="Externally assigned identifier", examples=["4"])
    title: str = Field(..., description="Album title", examples=["4:44"])
    artist: str = Field(..., description="Performing artist", examples=["Jay-Z"])
    # Strict mode still accepts integers.
    price: float = Field(
        ...,
        strict=True,
        allow_inf_nan=False,
        description="Price of the album",
        examples=[9.99],
    )


class NotFoundMessage(BaseModel):
    """Body returned when an album lookup yields no match."""

    msg: str = "Album not found"


class ValidationErrorItem(BaseModel):
    loc: List[Union[str, int]]
    msg: str


class InvalidPayloadMessage(BaseModel):
    """Body returned when a request body cannot be read as an album."""

    msg: str = "Invalid album payload"
    errors: List[ValidationErrorItem] = Field(default_factory=list)
