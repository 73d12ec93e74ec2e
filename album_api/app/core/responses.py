"""
Response classes shared by all routes.

Responses are pretty-printed with a four-space indent, matching the
output clients of the service have always received.
"""

import json
from typing import Any

from fastapi.responses import JSONResponse


class IndentedJSONResponse(JSONResponse):
    """JSON response rendered with indentation."""

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=4,
        ).encode("utf-8")
