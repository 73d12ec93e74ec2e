"""Album API client.

A thin wrapper around the album service's REST endpoints built on the
``requests`` library.  It exposes one method per operation:

* :meth:`health` – service status, name and version.
* :meth:`list_albums` – every album in the collection.
* :meth:`get_album` – a single album by id.
* :meth:`create_album` – add an album; the service assigns the id.
* :meth:`update_album` – partially update an album.
* :meth:`delete_album` – remove an album and return it.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list) and
``error`` is a dictionary with ``status_code`` and ``message``.  The
message is taken from the ``error`` or ``message`` field of the
service's response body.  Network failures produce an error with a
``status_code`` of ``None``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class AlbumAPIClient:
    """Client for interacting with the album API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:8080",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            timeout: Per-request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request and return ``(data, error)``."""
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method=method, url=url, json=json_body, timeout=self.timeout)
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _album_path(album_id: str) -> str:
        return f"/albums/{quote(str(album_id), safe='')}"

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def health(self) -> Result:
        """Return the health payload ``{status, service, version}``."""
        return self._request("GET", "/")

    def list_albums(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", "/albums")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def get_album(self, album_id: str) -> Result:
        return self._request("GET", self._album_path(album_id))

    def create_album(self, payload: Dict[str, Any]) -> Result:
        """Create an album from ``title``, ``artist`` and ``price``."""
        return self._request("POST", "/albums", json_body=payload)

    def update_album(self, album_id: str, payload: Dict[str, Any]) -> Result:
        """Partially update an album; omitted fields are left unchanged."""
        return self._request("PATCH", self._album_path(album_id), json_body=payload)

    def delete_album(self, album_id: str) -> Result:
        return self._request("DELETE", self._album_path(album_id))
