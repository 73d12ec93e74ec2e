"""
Pydantic models for album data.

``AlbumRead`` is the stored and returned representation.  The request
models ``AlbumCreate`` and ``AlbumUpdate`` accept every field as
optional: a missing or ``null`` field is treated like its zero value
and left to the service validators, which produce the human‑readable
messages clients rely on.  Any ``id`` sent by a client is ignored.
"""

from typing import Annotated, Optional

from pydantic import AllowInfNan, BaseModel, Field, Strict

# Prices must be JSON numbers; a quoted price is a decode error.
Price = Annotated[float, Strict(), AllowInfNan(False)]


class AlbumBase(BaseModel):
    title: Optional[str] = Field(None, examples=["Kind of Blue"])
    artist: Optional[str] = Field(None, examples=["Miles Davis"])
    price: Optional[Price] = Field(None, examples=[49.99])


class AlbumCreate(AlbumBase):
    """Schema for creating an album; all three fields are required by the service."""
    pass


class AlbumUpdate(AlbumBase):
    """Schema for partially updating an album.

    Only non-empty strings and prices above zero count as provided;
    anything else leaves the stored value untouched.
    """
    pass


class AlbumRead(BaseModel):
    """Schema for reading an album from the API."""

    id: str
    title: str
    artist: str
    price: float

    model_config = {
        "from_attributes": True,
    }
