"""
Album endpoints for API v1.

These routes expose CRUD operations over the in‑memory album
collection.  Handlers only translate between HTTP and the service:
validation failures and missing albums are raised by
:class:`AlbumService` and turned into responses by the exception
handlers registered in ``main.create_app``.

Request bodies are read and decoded here rather than by FastAPI, so a
JSON body is accepted whatever ``Content-Type`` the client sends, and
every undecodable body (bad UTF‑8, bad JSON, wrong field types) fails
the same way: with a ``RequestValidationError`` rendered as
``400 {"error": "Invalid JSON", ...}``.  A literal ``null`` body is an
empty album: it fails creation on the required fields and is a no‑op
for a patch.
"""

from typing import Any, Dict, List, Type, TypeVar

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from album_api.app.schemas.album import AlbumCreate, AlbumRead, AlbumUpdate
from album_api.app.services.album_service import AlbumService, get_album_service

router = APIRouter()

ModelT = TypeVar("ModelT", bound=BaseModel)


def _json_body_schema(model: Type[BaseModel]) -> Dict[str, Any]:
    return {
        "requestBody": {
            "content": {"application/json": {"schema": model.model_json_schema()}},
            "required": True,
        }
    }


async def read_json_body(request: Request, model: Type[ModelT]) -> ModelT:
    """Decode the raw request body into ``model``."""
    raw = await request.body()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise RequestValidationError(
            [
                {
                    "type": "json_invalid",
                    "loc": ("body", exc.start),
                    "msg": "JSON decode error",
                    "input": {},
                    "ctx": {"error": f"invalid UTF-8 byte at offset {exc.start}"},
                }
            ]
        ) from exc
    if text.strip() == "null":
        return model()
    try:
        return model.model_validate_json(text)
    except ValidationError as exc:
        errors = []
        for error in exc.errors(include_url=False):
            error["loc"] = ("body", *error.get("loc", ()))
            errors.append(error)
        raise RequestValidationError(errors) from exc


@router.get("", response_model=List[AlbumRead])
async def list_albums(service: AlbumService = Depends(get_album_service)) -> List[AlbumRead]:
    """Return all albums in the collection."""
    return service.list_albums()


@router.post(
    "",
    response_model=AlbumRead,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=_json_body_schema(AlbumCreate),
)
async def create_album(
    request: Request,
    service: AlbumService = Depends(get_album_service),
) -> AlbumRead:
    """Create a new album.

    Title, artist and price are all required.  The album is stored
    under a newly generated id; an ``id`` in the body is ignored.
    """
    album = await read_json_body(request, AlbumCreate)
    return service.create_album(album)


@router.get("/{album_id}", response_model=AlbumRead)
async def get_album(album_id: str, service: AlbumService = Depends(get_album_service)) -> AlbumRead:
    """Retrieve a single album by its id, or 404."""
    return service.get_album(album_id)


@router.delete("/{album_id}", response_model=AlbumRead)
async def delete_album(album_id: str, service: AlbumService = Depends(get_album_service)) -> AlbumRead:
    """Delete an album and return the removed record."""
    return service.delete_album(album_id)


@router.patch("/{album_id}", response_model=AlbumRead, openapi_extra=_json_body_schema(AlbumUpdate))
async def update_album(
    album_id: str,
    request: Request,
    service: AlbumService = Depends(get_album_service),
) -> AlbumRead:
    """Partially update an album.

    Only non-empty title/artist values and prices above zero are
    applied; the album id never changes.
    """
    updates = await read_json_body(request, AlbumUpdate)
    return service.update_album(album_id, updates)
