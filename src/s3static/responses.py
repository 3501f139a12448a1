"""HTTP-shaped responses and the mapping from fetched objects to them."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Mapping, TypeAlias

from .errors import InvocationError
from .result import Failure, Result, Success
from .storage import FetchedObject


JsonValue: TypeAlias = str | int | float | bool | None | dict[str, "JsonValue"] | list["JsonValue"]

JSON_CONTENT_TYPE = "application/json"

UNEXPECTED_METADATA_MESSAGE = "Unexpected object metadata"


@dataclass(frozen=True)
class Response:
    """Proxy-integration response.

    Attributes:
        status_code: HTTP status.
        body: Response body as text.
        headers: Response headers, or ``None`` to omit the field.
    """

    status_code: int
    body: str
    headers: Mapping[str, str] | None = None

    def to_dict(self) -> dict[str, object]:
        """Wire shape expected by API Gateway / ALB Lambda integrations."""
        payload: dict[str, object] = {"statusCode": self.status_code, "body": self.body}
        if self.headers is not None:
            payload["headers"] = dict(self.headers)
        return payload


def json_response(
    status_code: int, body: dict[str, JsonValue], headers: Mapping[str, str] | None = None
) -> Response:
    """Build a JSON response; ``Content-Type`` always wins over ``headers``."""
    return Response(
        status_code=status_code,
        body=json.dumps(body, separators=(",", ":")),
        headers={**(headers or {}), "Content-Type": JSON_CONTENT_TYPE},
    )


NOT_FOUND = json_response(404, {"message": "Not Found"})

INTERNAL_ERROR = json_response(500, {"message": "Internal lambda error"})


def object_to_response(obj: FetchedObject) -> Result[Response, InvocationError]:
    """Turn a fetched object into a 200 response.

    Body, content type and ETag must all be present; otherwise nothing is emitted
    and an InvocationError is returned.
    """
    match obj:
        case FetchedObject(
            body=bytes() as body, content_type=str() as content_type, etag=str() as etag
        ):
            return Success(
                Response(
                    status_code=200,
                    body=body.decode("utf-8", errors="replace"),
                    headers={"Content-Type": content_type, "ETag": etag},
                )
            )
        case _:
            return Failure(InvocationError(message=UNEXPECTED_METADATA_MESSAGE))
