"""
Error types raised by the album service.

Handlers registered in ``main.create_app`` translate these into HTTP
responses: validation failures become ``400 {"error": ...}`` and
missing albums ``404 {"message": "album not found"}``.
"""


class AlbumError(Exception):
    """Base class for album service errors."""


class AlbumValidationError(AlbumError):
    """A candidate field value failed validation."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class AlbumNotFoundError(AlbumError):
    """No album with the requested id exists in the collection."""

    message = "album not found"

    def __init__(self, album_id: str) -> None:
        super().__init__(f"album {album_id!r} not found")
        self.album_id = album_id
